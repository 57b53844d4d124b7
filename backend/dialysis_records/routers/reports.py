from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.patient import Patient
from dialysis_records.models.report import MonthlyReport
from dialysis_records.schemas.report import MonthlyReportCreate, MonthlyReportRow
from dialysis_records.services.records import check_patient_access, save_record

router = APIRouter()


@router.post("", status_code=201)
async def create_report(
    data: MonthlyReportCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, data.patient_id, current_user)
    report = MonthlyReport(recorded_by_user_id=current_user.id, **data.to_columns())
    await save_record(db, report, "report")
    return {"message": "Report saved successfully.", "reportId": report.id}


@router.get("", response_model=list[MonthlyReportRow])
async def get_reports(
    patient_id: Optional[int] = Query(None, alias="patientId"),
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    query = (
        select(MonthlyReport, Patient.full_name)
        .join(Patient, MonthlyReport.patient_id == Patient.patient_id)
        .where(Patient.user_id == current_user.id)
    )
    if patient_id is not None:
        query = query.where(MonthlyReport.patient_id == patient_id)
    query = query.order_by(MonthlyReport.recorded_at.desc(), MonthlyReport.id.desc())

    result = await db.execute(query)
    return [
        MonthlyReportRow(
            id=r.id,
            patient_id=r.patient_id,
            full_name=full_name,
            sessions_actual=r.sessions_actual,
            sessions_planned=r.sessions_planned,
            ktv_per_patient=r.ktv_per_patient,
            haemoglobin=r.haemoglobin,
            recorded_date=r.recorded_at.strftime("%Y-%m-%d %H:%M") if r.recorded_at else None,
        )
        for r, full_name in result.all()
    ]
