from datetime import date, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, case

from dialysis_records.models.hemodialysis import HemodialysisRecord
from dialysis_records.models.pathology import PathologyRecord
from dialysis_records.models.patient import Patient
from dialysis_records.models.patient_management import PatientManagementRecord
from dialysis_records.models.report import MonthlyReport
from dialysis_records.schemas.dashboard import DashboardSummary, QualityMetrics, Reminders, SessionCounts

TIME_FRAME_DAYS = {"Week": 7, "Month": 30, "Quarter": 90, "Year": 365}
DEFAULT_TIME_FRAME = "Year"
NOT_AVAILABLE = "N/A"


def time_frame_start(time_frame: str, today: Optional[date] = None) -> Optional[date]:
    """First day counted for a time frame; None means the full history."""
    days = TIME_FRAME_DAYS.get(time_frame)
    if days is None:
        return None
    return (today or date.today()) - timedelta(days=days)


def _number(value: Optional[float]) -> str:
    return NOT_AVAILABLE if value is None else f"{value:g}"


class DashboardService:
    async def summary(self, patient: Patient, time_frame: str, db: AsyncSession) -> DashboardSummary:
        sessions = await self._session_counts(patient.patient_id, time_frame, db)

        latest_report = await db.scalar(
            select(MonthlyReport)
            .where(MonthlyReport.patient_id == patient.patient_id)
            .order_by(MonthlyReport.recorded_at.desc(), MonthlyReport.id.desc())
            .limit(1)
        )
        if latest_report is not None:
            weight_gain = latest_report.intra_dialytic_weight_gain
            quality = QualityMetrics(
                ktvTrend=_number(latest_report.ktv_per_patient),
                urrPerformance=latest_report.urr_trend or NOT_AVAILABLE,
                weightAnalysis=f"{weight_gain:g} kg" if weight_gain is not None else NOT_AVAILABLE,
            )
        else:
            quality = QualityMetrics(
                ktvTrend=NOT_AVAILABLE, urrPerformance=NOT_AVAILABLE, weightAnalysis=NOT_AVAILABLE
            )

        last_test = await db.scalar(
            select(func.max(PathologyRecord.test_date)).where(PathologyRecord.patient_id == patient.patient_id)
        )
        next_task = await db.scalar(
            select(PatientManagementRecord.other_management_specify)
            .where(
                PatientManagementRecord.patient_id == patient.patient_id,
                PatientManagementRecord.other_management_specify.is_not(None),
            )
            .order_by(PatientManagementRecord.recorded_at.desc(), PatientManagementRecord.id.desc())
            .limit(1)
        )
        reminders = Reminders(
            scriptExpiryDate=patient.script_validity_end.isoformat() if patient.script_validity_end else NOT_AVAILABLE,
            lastPathologyTest=last_test.isoformat() if last_test else NOT_AVAILABLE,
            nextFollowUpTask=next_task or "No active task",
        )

        return DashboardSummary(sessions=sessions, qualityMetrics=quality, reminders=reminders)

    async def _session_counts(self, patient_id: int, time_frame: str, db: AsyncSession) -> SessionCounts:
        query = select(
            func.sum(case((HemodialysisRecord.session_type == "Chronic", 1), else_=0)),
            func.sum(case((HemodialysisRecord.session_type == "Acute", 1), else_=0)),
        ).where(HemodialysisRecord.patient_id == patient_id)

        start = time_frame_start(time_frame)
        if start is not None:
            query = query.where(HemodialysisRecord.session_date >= start)

        chronic, acute = (await db.execute(query)).one()
        return SessionCounts(timeFrame=time_frame, chronic=int(chronic or 0), acute=int(acute or 0))


dashboard_service = DashboardService()
