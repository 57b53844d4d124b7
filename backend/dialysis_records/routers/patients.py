from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.pathology import PathologyRecord
from dialysis_records.models.patient import Patient
from dialysis_records.schemas.patient import (
    PatientCreate, PatientCreated, PatientSearchResult, PatientSummary, PathologyCreate, PathologyResponse,
)
from dialysis_records.services.records import check_patient_access, get_owned_patient, save_record

router = APIRouter()

SEARCH_LIMIT = 20


def _age_on(dob: date, today: date) -> int:
    return today.year - dob.year - ((today.month, today.day) < (dob.month, dob.day))


def _summary(patient: Patient) -> PatientSummary:
    age = patient.age
    if age is None and patient.date_of_birth:
        age = _age_on(patient.date_of_birth, date.today())
    return PatientSummary(
        id=patient.patient_id,
        full_name=patient.full_name,
        age=age,
        gender=patient.gender,
        height=patient.height,
        weight=patient.weight,
        dialysis_modality=patient.dialysis_modality,
        access_type=patient.access_type,
        contact_details=patient.contact_details,
        date_of_birth=patient.date_of_birth,
    )


@router.get("", response_model=list[PatientSummary])
async def list_patients(
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    result = await db.execute(
        select(Patient).where(Patient.user_id == current_user.id).order_by(Patient.full_name.asc())
    )
    return [_summary(p) for p in result.scalars().all()]


@router.post("", response_model=PatientCreated, status_code=201)
async def create_patient(
    data: PatientCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    patient = Patient(user_id=current_user.id, **data.to_columns())
    await save_record(db, patient, "patient record")
    return PatientCreated(message="Patient record created successfully!", patientId=patient.patient_id)


@router.get("/search", response_model=list[PatientSearchResult])
async def search_patients(
    q: str = Query(..., min_length=1, description="Name substring or exact patient id"),
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    term = q.strip()
    conditions = [Patient.full_name.ilike(f"%{term}%")]
    if term.isdigit():
        conditions.append(Patient.patient_id == int(term))

    result = await db.execute(
        select(Patient)
        .where(Patient.user_id == current_user.id, or_(*conditions))
        .order_by(Patient.full_name.asc())
        .limit(SEARCH_LIMIT)
    )
    return [
        PatientSearchResult(id=p.patient_id, fullName=p.full_name, gender=p.gender, dateOfBirth=p.date_of_birth)
        for p in result.scalars().all()
    ]


@router.delete("/{patient_id}")
async def delete_patient(
    patient_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    patient = await get_owned_patient(db, patient_id, current_user)
    # Dependent records go with it through ON DELETE CASCADE
    await db.delete(patient)
    await db.flush()
    return {"deleted": True, "patient_id": patient_id}


@router.post("/{patient_id}/pathology", status_code=201)
async def add_pathology_record(
    patient_id: int,
    data: PathologyCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, patient_id, current_user)
    record = PathologyRecord(patient_id=patient_id, **data.to_columns())
    await save_record(db, record, "pathology record")
    return {
        "message": "Pathology record saved successfully",
        "record": PathologyResponse.model_validate(record),
    }


@router.get("/{patient_id}/pathology", response_model=list[PathologyResponse])
async def list_pathology_records(
    patient_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await get_owned_patient(db, patient_id, current_user)
    result = await db.execute(
        select(PathologyRecord)
        .where(PathologyRecord.patient_id == patient_id)
        .order_by(PathologyRecord.test_date.desc(), PathologyRecord.id.desc())
    )
    return [PathologyResponse.model_validate(r) for r in result.scalars().all()]
