from pydantic import BaseModel
from typing import Optional

from dialysis_records.schemas.fields import FormModel, PlainDate, RequiredInt, Text


class ManagementCreate(FormModel):
    patient_id: RequiredInt
    last_flu_vaccine_date: PlainDate = None
    last_pneumo_vaccine_date: PlainDate = None
    other_vaccination_notes: Text = None
    last_dietician_visit_date: PlainDate = None
    dietician_compliance_notes: Text = None
    last_fistula_assessment_date: PlainDate = None
    fistula_condition: Text = None
    fistula_notes: Text = None
    other_management_specify: Text = None


class ManagementSummaryRow(BaseModel):
    """Dates pre-rendered as strings for the summary table."""
    id: int
    patient_id: int
    last_flu_vaccine_date: Optional[str] = None
    last_dietician_visit_date: Optional[str] = None
    last_fistula_assessment_date: Optional[str] = None
    other_management_specify: Optional[str] = None
    recorded_at: Optional[str] = None
