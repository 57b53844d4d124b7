from sqlalchemy import Column, Integer, String, Date, Time, Text, DateTime, Float, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class HemodialysisRecord(Base):
    __tablename__ = "hemodialysis_records"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    recorded_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    session_date = Column(Date, nullable=False, index=True)
    session_type = Column(String(20), nullable=False, default="Chronic")  # "Chronic" | "Acute"
    pre_weight = Column(Float)
    post_weight = Column(Float)
    duration_hours = Column(Float)
    dialyzer_type = Column(String(100))
    blood_flow_rate = Column(Integer)
    dialysate_flow_rate = Column(Integer)
    staff_initials = Column(String(10))
    diagnosis = Column(String(255))
    time_on = Column(Time)
    time_off = Column(Time)
    notes = Column(Text)
    signature_data = Column(Text)  # base64 data URL, stored as-is
    created_at = Column(DateTime(timezone=True), server_default=func.now())
