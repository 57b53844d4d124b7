import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.clinical_progress import ClinicalProgressEntry
from dialysis_records.schemas.clinical_progress import ProgressEntryResponse, ProgressLogCreate
from dialysis_records.services.records import check_patient_access, get_owned_patient, save_records

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/log", status_code=201)
async def save_clinical_progress_log(
    data: ProgressLogCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, data.patient_id, current_user)
    batch_id = str(uuid.uuid4())
    entries = [
        ClinicalProgressEntry(
            patient_id=data.patient_id,
            recorded_by_user_id=current_user.id,
            batch_id=batch_id,
            entry_date_time=entry.date_time,
            log_date_time_action=entry.action,
            notes=entry.notes,
            staff_signature_text=entry.signature_text,
            staff_signature_image=entry.signature_image,
            staff_qualification=entry.qualification,
        )
        for entry in data.log_entries
    ]
    await save_records(db, entries, "clinical progress log")
    logger.info("Saved %d log entries for patient %s (batch %s)", len(entries), data.patient_id, batch_id)
    return {
        "message": "Log entries saved successfully!",
        "batchId": batch_id,
        "records": [ProgressEntryResponse.model_validate(e) for e in entries],
    }


@router.get("/{patient_id}", response_model=list[ProgressEntryResponse])
async def get_clinical_progress_logs(
    patient_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await get_owned_patient(db, patient_id, current_user)
    result = await db.execute(
        select(ClinicalProgressEntry)
        .where(ClinicalProgressEntry.patient_id == patient_id)
        .order_by(ClinicalProgressEntry.created_at.desc(), ClinicalProgressEntry.log_id.desc())
    )
    return [ProgressEntryResponse.model_validate(e) for e in result.scalars().all()]
