from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.hemodialysis import HemodialysisRecord
from dialysis_records.models.patient import Patient
from dialysis_records.schemas.hemodialysis import (
    HemodialysisCreate, HemodialysisResponse, HemodialysisSummaryRow,
)
from dialysis_records.schemas.patient import PatientAutofill
from dialysis_records.services.records import check_patient_access, get_owned_patient, save_record

router = APIRouter()


@router.post("/{patient_id}/record", status_code=201)
async def save_hemodialysis_record(
    patient_id: int,
    data: HemodialysisCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, patient_id, current_user)
    record = HemodialysisRecord(
        patient_id=patient_id,
        recorded_by_user_id=current_user.id,
        **data.to_columns(),
    )
    await save_record(db, record, "hemodialysis record")
    return {
        "message": "Hemodialysis record saved successfully!",
        "record": HemodialysisResponse.model_validate(record),
    }


@router.get("/{patient_id}/records", response_model=list[HemodialysisSummaryRow])
async def get_hemodialysis_records(
    patient_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    result = await db.execute(
        select(HemodialysisRecord, Patient.full_name)
        .join(Patient, HemodialysisRecord.patient_id == Patient.patient_id)
        .where(HemodialysisRecord.patient_id == patient_id, Patient.user_id == current_user.id)
        .order_by(HemodialysisRecord.session_date.desc(), HemodialysisRecord.id.desc())
    )
    return [
        HemodialysisSummaryRow(
            record_id=r.id,
            patient_id=r.patient_id,
            full_name=full_name,
            session_date=r.session_date,
            session_type=r.session_type,
            diagnosis=r.diagnosis,
            time_on=r.time_on,
            time_off=r.time_off,
            pre_weight=r.pre_weight,
            post_weight=r.post_weight,
            staff_initials=r.staff_initials,
        )
        for r, full_name in result.all()
    ]


@router.get("/patient/{patient_id}", response_model=PatientAutofill)
async def get_patient_details_for_chart(
    patient_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    patient = await get_owned_patient(db, patient_id, current_user)
    return PatientAutofill(
        patient_id=patient.patient_id,
        name=patient.full_name,
        age=patient.age,
        address=patient.address,
        contact_details=patient.contact_details,
        gender=patient.gender,
        height=patient.height,
        dialyzer=patient.dialyser,
        access_type=patient.access_type,
        diagnosis=patient.diagnosis,
    )
