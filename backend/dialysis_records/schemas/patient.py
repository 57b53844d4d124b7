from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional

from dialysis_records.schemas.fields import (
    FormModel, CleanFloat, Flag, PlainDate, RequiredDate, RequiredText, SmallInt, Text,
)


class PatientCreate(FormModel):
    full_name: RequiredText
    date_of_birth: PlainDate = None
    gender: Text = None
    age: SmallInt = None
    height: CleanFloat = None
    weight: CleanFloat = None
    address: Text = None
    contact_details: Text = None
    next_of_kin: Text = None
    access_type: Text = None
    diabetic_status: Flag = None
    smoking_status: Flag = None
    dialysis_modality: Text = None
    frequency: SmallInt = None
    dialyser: Text = None
    buffer: Text = None
    qd: CleanFloat = None
    qb: CleanFloat = None
    anticoagulant: Text = None
    diagnosis: Text = None
    script_duration: Text = Field(default=None, alias="prescribedDose")
    script_validity_start: PlainDate = Field(default=None, alias="scriptStartDate")
    script_validity_end: PlainDate = Field(default=None, alias="scriptExpiryDate")
    script_reminder: Text = None


class PatientCreated(BaseModel):
    message: str
    patientId: int


class PatientSummary(BaseModel):
    """Row shape of the patient list view."""
    id: int
    full_name: str
    age: Optional[int] = None
    gender: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    dialysis_modality: Optional[str] = None
    access_type: Optional[str] = None
    contact_details: Optional[str] = None
    date_of_birth: Optional[date] = None


class PatientSearchResult(BaseModel):
    id: int
    fullName: str
    gender: Optional[str] = None
    dateOfBirth: Optional[date] = None


class PatientAutofill(BaseModel):
    """Master-record fields used to pre-fill the hemodialysis chart."""
    patient_id: int
    name: str
    age: Optional[int] = None
    address: Optional[str] = None
    contact_details: Optional[str] = None
    gender: Optional[str] = None
    height: Optional[float] = None
    dialyzer: Optional[str] = None
    access_type: Optional[str] = None
    diagnosis: Optional[str] = None


class PathologyCreate(FormModel):
    test_name: RequiredText
    test_type: Text = None
    test_date: RequiredDate
    result_value: RequiredText = Field(alias="testResult")
    result_unit: Text = Field(default=None, alias="resultUnit")


class PathologyResponse(BaseModel):
    id: int
    patient_id: int
    test_name: str
    test_type: Optional[str] = None
    test_date: date
    result_value: str
    result_unit: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
