"""
Shared persistence helpers for the record handlers.

Every create path funnels through ``save_record`` so database failures are
translated the same way everywhere: foreign-key errors become
``ForeignKeyViolation`` (400), everything else ``PersistenceError`` (500).
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dialysis_records.auth import AccountPrincipal
from dialysis_records.exceptions import ForeignKeyViolation, NotFound, PersistenceError
from dialysis_records.models.patient import Patient

logger = logging.getLogger(__name__)

FOREIGN_KEY_SQLSTATE = "23503"
UNIQUE_SQLSTATE = "23505"


def _sqlstate(error: SQLAlchemyError) -> Optional[str]:
    orig = getattr(error, "orig", None)
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def driver_message(error: SQLAlchemyError) -> str:
    orig = getattr(error, "orig", None)
    return str(orig) if orig is not None else str(error)


def is_foreign_key_violation(error: SQLAlchemyError) -> bool:
    return _sqlstate(error) == FOREIGN_KEY_SQLSTATE or "FOREIGN KEY constraint failed" in driver_message(error)


def is_unique_violation(error: SQLAlchemyError) -> bool:
    return _sqlstate(error) == UNIQUE_SQLSTATE or "UNIQUE constraint failed" in driver_message(error)


def translate_db_error(error: SQLAlchemyError, label: str) -> Exception:
    if isinstance(error, IntegrityError) and is_foreign_key_violation(error):
        logger.warning("Foreign key violation saving %s: %s", label, driver_message(error))
        return ForeignKeyViolation(
            f"Invalid Patient ID or User ID: foreign key constraint failed for {label}.",
            details=driver_message(error),
        )
    logger.exception("Database error saving %s: %s", label, driver_message(error))
    return PersistenceError(f"Failed to save {label}.", details=driver_message(error))


async def save_record(db: AsyncSession, instance, label: str):
    """Insert one row, flush it and reload server-side defaults."""
    db.add(instance)
    try:
        await db.flush()
        await db.refresh(instance)
    except SQLAlchemyError as e:
        raise translate_db_error(e, label) from e
    return instance


async def save_records(db: AsyncSession, instances: list, label: str) -> list:
    db.add_all(instances)
    try:
        await db.flush()
        for instance in instances:
            await db.refresh(instance)
    except SQLAlchemyError as e:
        raise translate_db_error(e, label) from e
    return instances


async def get_owned_patient(db: AsyncSession, patient_id: int, user: AccountPrincipal) -> Patient:
    patient = await db.scalar(select(Patient).where(Patient.patient_id == patient_id))
    if patient is None or not user.owns(patient.user_id):
        raise NotFound("Patient not found or unauthorized access.")
    return patient


async def check_patient_access(db: AsyncSession, patient_id: int, user: AccountPrincipal) -> None:
    """Reject patients owned by another account.

    A patient id that does not exist at all is let through so the insert
    fails on the foreign key and surfaces as ``ForeignKeyViolation``.
    """
    owner_id = await db.scalar(select(Patient.user_id).where(Patient.patient_id == patient_id))
    if owner_id is not None and not user.owns(owner_id):
        raise NotFound("Patient not found or unauthorized access.")
