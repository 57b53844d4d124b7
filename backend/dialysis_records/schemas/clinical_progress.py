from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from dialysis_records.schemas.fields import FormModel, RequiredInt, RequiredText, Text


class LogEntryIn(FormModel):
    date_time: Text = None
    action: RequiredText
    notes: RequiredText
    signature_text: Text = None
    signature_image: Text = None
    qualification: RequiredText


class ProgressLogCreate(FormModel):
    patient_id: RequiredInt
    log_entries: list[LogEntryIn] = Field(min_length=1)


class ProgressEntryResponse(BaseModel):
    log_id: int
    patient_id: int
    batch_id: str
    entry_date_time: Optional[str] = None
    log_date_time_action: str
    notes: str
    staff_signature_text: Optional[str] = None
    staff_signature_image: Optional[str] = None
    staff_qualification: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
