from sqlalchemy import Column, Integer, SmallInteger, String, Date, Text, DateTime, Boolean, Float, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class Patient(Base):
    """Patient master record. Every clinical record hangs off one of these."""
    __tablename__ = "patient_master_records"

    patient_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    date_of_birth = Column(Date)
    gender = Column(String(10))
    age = Column(SmallInteger)
    height = Column(Float)
    weight = Column(Float)
    address = Column(Text)
    contact_details = Column(String(50))
    next_of_kin = Column(Text)
    access_type = Column(String(50))
    diabetic_status = Column(Boolean)
    smoking_status = Column(Boolean)
    dialysis_modality = Column(String(50))
    frequency = Column(SmallInteger)
    script_duration = Column(String(50))
    dialyser = Column(String(50))
    buffer = Column(String(50))
    qd = Column(Float)
    qb = Column(Float)
    anticoagulant = Column(String(50))
    diagnosis = Column(String(255))
    script_validity_start = Column(Date)
    script_validity_end = Column(Date)
    script_reminder = Column(String(50), default="1 Month")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
