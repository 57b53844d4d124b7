from pydantic import BaseModel
from typing import Optional

from dialysis_records.schemas.fields import FormModel, CleanFloat, RequiredInt, Text


class MonthlyReportCreate(FormModel):
    patient_id: RequiredInt
    sessions_actual: RequiredInt
    sessions_planned: RequiredInt
    ktv_per_patient: CleanFloat = None
    weight_analysis_value: CleanFloat = None
    weight_analysis_type: Text = None
    urr_trend: Text = None
    treatment_plan_vs_actual: Text = None
    consumables_per_patient: Text = None
    scheduling: Text = None
    ktv_quality: Text = None
    intra_dialytic_weight_gain: CleanFloat = None
    micturation: Text = None
    haemoglobin: CleanFloat = None


class MonthlyReportRow(BaseModel):
    id: int
    patient_id: int
    full_name: Optional[str] = None
    sessions_actual: int
    sessions_planned: int
    ktv_per_patient: Optional[float] = None
    haemoglobin: Optional[float] = None
    recorded_date: Optional[str] = None
