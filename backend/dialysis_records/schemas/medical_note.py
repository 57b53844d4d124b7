from pydantic import BaseModel
import datetime as dt
from typing import Optional

from dialysis_records.schemas.fields import FormModel, CleanFloat, CleanInt, PlainDate, Text


class MedicalNoteCreate(FormModel):
    """Legacy medical-notes form. Keys arrive in snake_case."""

    class Config:
        alias_generator = None
        extra = "forbid"

    note_year: CleanInt = None
    note_month: CleanInt = None
    # general details
    name: Text = None
    surname: Text = None
    diagnosis: Text = None
    medical_aid_name: Text = None
    medical_aid_no: Text = None
    doctor: Text = None
    access: Text = None
    needle_size: Text = None
    port_length: Text = None
    height: CleanFloat = None
    age: CleanFloat = None
    # prescription
    dialyzer: Text = None
    dry_weight: CleanFloat = None
    dialysate_speed_qd: CleanFloat = None
    blood_pump_speed_qb: CleanFloat = None
    treatment_hours: CleanFloat = None
    anticoagulation_and_dose: Text = None
    # session
    date: PlainDate = None
    time_on: Text = None
    primed_by: Text = None
    stock_utilised: Text = None
    # pre-assessment
    weight: CleanFloat = None
    blood_pressure: Text = None
    pulse: CleanFloat = None
    blood_glucose: CleanFloat = None
    temperature: CleanFloat = None
    hgt: CleanFloat = None
    saturation: CleanFloat = None
    post_connection_bp: Text = None
    # post-dialysis
    pre_disconnection_bp: Text = None
    post_disconnection_bp: Text = None
    w_post: CleanFloat = None
    qd_post: CleanFloat = None
    qb_post: CleanFloat = None
    uf: CleanFloat = None
    ktv: CleanFloat = None
    time_of: Text = None
    disconnected_by: Text = None


class MedicalNoteRow(BaseModel):
    id: int
    name: Optional[str] = None
    surname: Optional[str] = None
    diagnosis: Optional[str] = None
    doctor: Optional[str] = None
    date: Optional[dt.date] = None
    dialyzer: Optional[str] = None
    weight: Optional[float] = None
    note_year: Optional[int] = None
    note_month: Optional[int] = None
