from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.patient import Patient
from dialysis_records.models.patient_management import PatientManagementRecord
from dialysis_records.schemas.patient_management import ManagementCreate, ManagementSummaryRow
from dialysis_records.services.records import check_patient_access, save_record

router = APIRouter()


def _day(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def _minute(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%Y-%m-%d %H:%M") if value else None


@router.post("", status_code=201)
async def create_patient_management_record(
    data: ManagementCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, data.patient_id, current_user)
    record = PatientManagementRecord(recorded_by_user_id=current_user.id, **data.to_columns())
    await save_record(db, record, "patient management record")
    return {"message": "Patient Management record saved successfully.", "recordId": record.id}


@router.get("", response_model=list[ManagementSummaryRow])
async def get_patient_management_records(
    patient_id: Optional[int] = Query(None, alias="patientId"),
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    query = (
        select(PatientManagementRecord)
        .join(Patient, PatientManagementRecord.patient_id == Patient.patient_id)
        .where(Patient.user_id == current_user.id)
    )
    if patient_id is not None:
        query = query.where(PatientManagementRecord.patient_id == patient_id)
    query = query.order_by(PatientManagementRecord.recorded_at.desc(), PatientManagementRecord.id.desc())

    result = await db.execute(query)
    return [
        ManagementSummaryRow(
            id=r.id,
            patient_id=r.patient_id,
            last_flu_vaccine_date=_day(r.last_flu_vaccine_date),
            last_dietician_visit_date=_day(r.last_dietician_visit_date),
            last_fistula_assessment_date=_day(r.last_fistula_assessment_date),
            other_management_specify=r.other_management_specify,
            recorded_at=_minute(r.recorded_at),
        )
        for r in result.scalars().all()
    ]
