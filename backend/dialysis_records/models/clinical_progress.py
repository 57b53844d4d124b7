from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class ClinicalProgressEntry(Base):
    """One progress-log line. Lines submitted together share a batch_id."""
    __tablename__ = "clinical_progress_logs"

    log_id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    recorded_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    batch_id = Column(String(36), nullable=False, index=True)
    entry_date_time = Column(String(50))  # as shown on the form, e.g. "19/10/2026, 08:15"
    log_date_time_action = Column(String(255), nullable=False)
    notes = Column(Text, nullable=False)
    staff_signature_text = Column(String(255))
    staff_signature_image = Column(Text)
    staff_qualification = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
