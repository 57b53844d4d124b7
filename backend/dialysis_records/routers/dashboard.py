from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.schemas.dashboard import DashboardSummary
from dialysis_records.services.dashboard_service import DEFAULT_TIME_FRAME, dashboard_service
from dialysis_records.services.records import get_owned_patient

router = APIRouter()


@router.get("/{patient_id}", response_model=DashboardSummary)
async def get_dashboard_summary(
    patient_id: int,
    time_frame: str = Query(DEFAULT_TIME_FRAME, alias="timeFrame", description="Week, Month, Quarter or Year"),
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    patient = await get_owned_patient(db, patient_id, current_user)
    return await dashboard_service.summary(patient, time_frame, db)
