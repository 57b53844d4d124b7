from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional

from dialysis_records.schemas.fields import FormModel, PlainDate, RequiredDate, RequiredText, Text, Timestamp


class MaintenanceCreate(FormModel):
    machine_make: RequiredText
    serial_number: RequiredText
    maintenance_date: RequiredDate
    next_service_date: PlainDate = None
    maintenance_type: Text = None
    performed_by_company: Text = Field(default=None, alias="company")
    performed_by_staff: Text = Field(default=None, alias="staff")
    disinfection_time: Timestamp = None
    notes: Text = None


class MaintenanceResponse(BaseModel):
    id: int
    machine_make: str
    serial_number: str
    maintenance_date: date
    next_service_date: Optional[date] = None
    maintenance_type: Optional[str] = None
    performed_by_company: Optional[str] = None
    performed_by_staff: Optional[str] = None
    disinfection_time: Optional[datetime] = None
    notes: Optional[str] = None
    recorded_at: Optional[datetime] = None

    class Config:
        from_attributes = True
