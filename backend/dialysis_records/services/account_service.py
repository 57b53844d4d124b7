import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from dialysis_records.auth import create_token, hash_password, verify_password
from dialysis_records.exceptions import DuplicateEmail, InvalidCredentials
from dialysis_records.models.user import Account
from dialysis_records.services.records import is_unique_violation, translate_db_error

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


class AccountService:
    async def register(
        self, db: AsyncSession, email: str, first_name: str, last_name: str, password: str
    ) -> Account:
        logger.info("Register attempt for %s", email)
        existing = await db.scalar(select(Account.id).where(Account.email == email))
        if existing is not None:
            raise DuplicateEmail("Email already exists")

        password_hash = await run_in_threadpool(hash_password, password)
        account = Account(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
        )
        db.add(account)
        try:
            await db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            if is_unique_violation(e):
                raise DuplicateEmail("Email already exists") from e
            raise translate_db_error(e, "account") from e
        await db.refresh(account)
        return account

    async def login(self, db: AsyncSession, email: str, password: str) -> str:
        logger.info("Login attempt for %s", email)
        account = await db.scalar(select(Account).where(Account.email == email))
        if account is None:
            logger.info("Login failed: %s not found", email)
            raise InvalidCredentials(INVALID_CREDENTIALS)

        matches = await run_in_threadpool(verify_password, account.password_hash, password)
        if not matches:
            logger.info("Login failed: password mismatch for %s", email)
            raise InvalidCredentials(INVALID_CREDENTIALS)

        logger.info("Login success for %s", email)
        return create_token(account)


account_service = AccountService()
