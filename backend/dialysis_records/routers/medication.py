from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.medication import MedicationComorbidities
from dialysis_records.schemas.medication import MedicationCreate, MedicationResponse
from dialysis_records.services.records import check_patient_access, get_owned_patient, save_record

router = APIRouter()


@router.post("", status_code=201)
@router.post("/records", status_code=201)
async def create_medication_comorbidities(
    data: MedicationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, data.patient_id, current_user)
    record = MedicationComorbidities(created_by=current_user.id, **data.to_columns())
    await save_record(db, record, "medication and co-morbidities record")
    return {
        "message": f"Medication & Co-morbidities record saved successfully for Patient {data.patient_id}",
        "recordId": record.id,
    }


@router.get("/records", response_model=list[MedicationResponse])
async def list_medication_records(
    patient_id: int = Query(..., alias="patientId"),
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await get_owned_patient(db, patient_id, current_user)
    result = await db.execute(
        select(MedicationComorbidities)
        .where(MedicationComorbidities.patient_id == patient_id)
        .order_by(MedicationComorbidities.created_at.desc(), MedicationComorbidities.id.desc())
    )
    return [MedicationResponse.model_validate(r) for r in result.scalars().all()]
