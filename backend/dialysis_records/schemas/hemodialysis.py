from pydantic import BaseModel, Field
from datetime import date, datetime, time
from typing import Literal, Optional

from dialysis_records.schemas.fields import (
    FormModel, CleanFloat, CleanInt, ClockTime, RequiredDate, Text,
)


class HemodialysisCreate(FormModel):
    session_date: RequiredDate = Field(alias="dialysisDate")
    session_type: Literal["Chronic", "Acute"] = "Chronic"
    pre_weight: CleanFloat = None
    post_weight: CleanFloat = None
    duration_hours: CleanFloat = None
    dialyzer_type: Text = None
    blood_flow_rate: CleanInt = None
    dialysate_flow_rate: CleanInt = None
    staff_initials: Text = None
    diagnosis: Text = None
    time_on: ClockTime = None
    time_off: ClockTime = None
    notes: Text = None
    signature_data: Text = Field(default=None, alias="signatureImage")


class HemodialysisResponse(BaseModel):
    id: int
    patient_id: int
    session_date: date
    session_type: str
    pre_weight: Optional[float] = None
    post_weight: Optional[float] = None
    duration_hours: Optional[float] = None
    dialyzer_type: Optional[str] = None
    blood_flow_rate: Optional[int] = None
    dialysate_flow_rate: Optional[int] = None
    staff_initials: Optional[str] = None
    diagnosis: Optional[str] = None
    time_on: Optional[time] = None
    time_off: Optional[time] = None
    notes: Optional[str] = None
    signature_data: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HemodialysisSummaryRow(BaseModel):
    record_id: int
    patient_id: int
    full_name: str
    session_date: date
    session_type: str
    diagnosis: Optional[str] = None
    time_on: Optional[time] = None
    time_off: Optional[time] = None
    pre_weight: Optional[float] = None
    post_weight: Optional[float] = None
    staff_initials: Optional[str] = None
