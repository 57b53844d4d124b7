from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class PathologyRecord(Base):
    __tablename__ = "pathology_records"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    test_name = Column(String(255), nullable=False)
    test_type = Column(String(100))
    test_date = Column(Date, nullable=False)
    result_value = Column(String(100), nullable=False)
    result_unit = Column(String(50))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
