from sqlalchemy import Column, Integer, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class PatientManagementRecord(Base):
    __tablename__ = "patients_management_records"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    recorded_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    last_flu_vaccine_date = Column(Date)
    last_pneumo_vaccine_date = Column(Date)
    other_vaccination_notes = Column(Text)
    last_dietician_visit_date = Column(Date)
    dietician_compliance_notes = Column(Text)
    last_fistula_assessment_date = Column(Date)
    fistula_condition = Column(String(100))
    fistula_notes = Column(Text)
    other_management_specify = Column(Text)
    recorded_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
