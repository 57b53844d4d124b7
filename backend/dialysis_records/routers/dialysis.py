from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.dialysis_chart import DialysisChart
from dialysis_records.schemas.dialysis_chart import (
    DialysisChartCreate, DialysisChartCreated, DialysisChartResponse,
)
from dialysis_records.services.records import check_patient_access, get_owned_patient, save_record

router = APIRouter()


# "/save" is the path older chart pages post to; both land here.
@router.post("/chart", response_model=DialysisChartCreated, status_code=201)
@router.post("/save", response_model=DialysisChartCreated, status_code=201)
async def create_dialysis_chart(
    data: DialysisChartCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await check_patient_access(db, data.patient_id, current_user)
    chart = DialysisChart(recorded_by_user_id=current_user.id, **data.to_columns())
    await save_record(db, chart, "dialysis chart")
    return DialysisChartCreated(
        message="Dialysis Chart saved successfully!",
        chartId=chart.id,
        created_at=chart.created_at,
    )


@router.get("/{patient_id}/charts", response_model=list[DialysisChartResponse])
async def list_dialysis_charts(
    patient_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    await get_owned_patient(db, patient_id, current_user)
    result = await db.execute(
        select(DialysisChart)
        .where(DialysisChart.patient_id == patient_id)
        .order_by(DialysisChart.created_at.desc(), DialysisChart.id.desc())
    )
    return [DialysisChartResponse.model_validate(c) for c in result.scalars().all()]
