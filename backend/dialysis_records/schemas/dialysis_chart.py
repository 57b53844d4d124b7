from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional

from dialysis_records.schemas.fields import (
    FormModel, CleanFloat, PlainDate, RequiredInt, Text,
)


class VitalsInterval(BaseModel):
    time: Optional[str] = None
    bp: Optional[str] = None
    pulse: Optional[str] = None
    ap: Optional[str] = None
    vp: Optional[str] = None


class DialysisChartCreate(FormModel):
    patient_id: RequiredInt

    plan_type: Text = None
    plan_date: PlainDate = None

    pre_date: PlainDate = None
    pre_time: Text = None
    pre_hb: CleanFloat = Field(default=None, alias="preHB")
    pre_bp: Text = Field(default=None, alias="preBP")
    pre_pulse: CleanFloat = None
    pre_glucose: CleanFloat = None
    pre_weight: CleanFloat = None
    pre_temp: CleanFloat = None
    micturition: Text = None
    uf_set: CleanFloat = None
    machine_type: Text = None
    machine_readings: Text = None
    primed_by: Text = None

    connected_by: Text = None
    intra_time: Text = None
    consumable: Text = None
    additional_consumable: Text = None
    qb: CleanFloat = None
    qd: CleanFloat = None
    tmp: CleanFloat = None
    uf_rate: CleanFloat = None
    clotting: Text = None
    reason: Text = None
    heparin_dose: Text = None
    iron_sucrose: Text = None
    vitals_intervals: list[VitalsInterval] = []

    post_date: PlainDate = None
    post_time: Text = None
    post_bp: Text = Field(default=None, alias="postBP")
    post_pulse: CleanFloat = None
    post_weight: CleanFloat = None
    post_temp: CleanFloat = None
    fluid_removed: CleanFloat = None
    finished_by: Text = None

    signature_data: Text = Field(default=None, alias="signatureImage")

    def to_columns(self) -> dict:
        columns = super().to_columns()
        columns["vitals_intervals"] = [v.model_dump() for v in self.vitals_intervals]
        return columns


class DialysisChartCreated(BaseModel):
    message: str
    chartId: int
    created_at: Optional[datetime] = None


class DialysisChartResponse(BaseModel):
    id: int
    patient_id: int
    plan_type: Optional[str] = None
    plan_date: Optional[date] = None
    pre_date: Optional[date] = None
    pre_weight: Optional[float] = None
    post_weight: Optional[float] = None
    fluid_removed: Optional[float] = None
    qb: Optional[float] = None
    qd: Optional[float] = None
    vitals_intervals: list[dict] = []
    finished_by: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
