from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dialysis_records.config import get_settings
from dialysis_records.database import get_db
from dialysis_records.schemas.auth import (
    AccountResponse, LoginRequest, RegisterRequest, RegisterResponse, TokenResponse,
)
from dialysis_records.services.account_service import account_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    account = await account_service.register(
        db,
        email=body.email.strip().lower(),
        first_name=body.first_name,
        last_name=body.last_name,
        password=body.password,
    )
    return RegisterResponse(msg="User registered successfully", user=AccountResponse.model_validate(account))


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    token = await account_service.login(db, email=body.email.strip().lower(), password=body.password)
    return TokenResponse(token=token, expires_in=get_settings().jwt_expire_seconds)
