from sqlalchemy import Column, Integer, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class EquipmentMaintenanceRecord(Base):
    """Global equipment log; not tied to a patient."""
    __tablename__ = "equipment_maintenance_records"

    id = Column(Integer, primary_key=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    machine_make = Column(String(100), nullable=False)
    serial_number = Column(String(100), nullable=False)
    maintenance_date = Column(Date, nullable=False, index=True)
    next_service_date = Column(Date)
    maintenance_type = Column(String(100))
    performed_by_company = Column(String(255))
    performed_by_staff = Column(String(255))
    disinfection_time = Column(DateTime)
    notes = Column(Text)
    recorded_at = Column(DateTime(timezone=True), server_default=func.now())
