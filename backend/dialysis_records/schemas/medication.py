from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from dialysis_records.schemas.fields import FormModel, CheckedFlag, RequiredInt, Text


class MedicationCreate(FormModel):
    patient_id: RequiredInt
    medication_specify: Text = None
    diabetic: CheckedFlag = False
    cardio: CheckedFlag = False
    hypercholesterolemia: CheckedFlag = False
    pulmonary: CheckedFlag = False
    cancer: CheckedFlag = False
    auto_immune: CheckedFlag = False
    endocrine: CheckedFlag = False
    other_comorbidity_specify: Text = Field(default=None, alias="otherCoMorbiditySpecify")


class MedicationResponse(BaseModel):
    id: int
    patient_id: int
    medication_specify: Optional[str] = None
    diabetic: Optional[bool] = None
    cardio: Optional[bool] = None
    hypercholesterolemia: Optional[bool] = None
    pulmonary: Optional[bool] = None
    cancer: Optional[bool] = None
    auto_immune: Optional[bool] = None
    endocrine: Optional[bool] = None
    other_comorbidity_specify: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
