from sqlalchemy import Column, Integer, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class MedicationComorbidities(Base):
    __tablename__ = "medication_comorbidities"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    medication_specify = Column(Text)
    diabetic = Column(Boolean, default=False)
    cardio = Column(Boolean, default=False)
    hypercholesterolemia = Column(Boolean, default=False)
    pulmonary = Column(Boolean, default=False)
    cancer = Column(Boolean, default=False)
    auto_immune = Column(Boolean, default=False)
    endocrine = Column(Boolean, default=False)
    other_comorbidity_specify = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
