from pydantic import BaseModel


class SessionCounts(BaseModel):
    timeFrame: str
    chronic: int
    acute: int


class QualityMetrics(BaseModel):
    ktvTrend: str
    urrPerformance: str
    weightAnalysis: str


class Reminders(BaseModel):
    scriptExpiryDate: str
    lastPathologyTest: str
    nextFollowUpTask: str


class DashboardSummary(BaseModel):
    sessions: SessionCounts
    qualityMetrics: QualityMetrics
    reminders: Reminders
