from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class MonthlyReport(Base):
    __tablename__ = "patients_report_records"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    recorded_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    sessions_actual = Column(Integer, nullable=False)
    sessions_planned = Column(Integer, nullable=False)
    ktv_per_patient = Column(Float)
    weight_analysis_value = Column(Float)
    weight_analysis_type = Column(String(50))
    urr_trend = Column(String(100))
    treatment_plan_vs_actual = Column(Text)
    consumables_per_patient = Column(Text)
    scheduling = Column(Text)
    # Quality metrics
    ktv_quality = Column(String(100))
    intra_dialytic_weight_gain = Column(Float)
    micturation = Column(String(100))
    haemoglobin = Column(Float)
    recorded_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
