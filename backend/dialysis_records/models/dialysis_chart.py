from sqlalchemy import Column, Integer, String, Date, Text, DateTime, Float, JSON, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


class DialysisChart(Base):
    __tablename__ = "dialysis_charts"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patient_master_records.patient_id", ondelete="CASCADE"), nullable=False, index=True
    )
    recorded_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))

    # Treatment plan
    plan_type = Column(String(50))
    plan_date = Column(Date)

    # Pre-dialysis
    pre_date = Column(Date)
    pre_time = Column(String(10))
    pre_hb = Column(Float)
    pre_bp = Column(String(20))
    pre_pulse = Column(Float)
    pre_glucose = Column(Float)
    pre_weight = Column(Float)
    pre_temp = Column(Float)
    micturition = Column(String(50))
    uf_set = Column(Float)
    machine_type = Column(String(100))
    machine_readings = Column(Text)
    primed_by = Column(String(100))

    # Intra-dialysis
    connected_by = Column(String(100))
    intra_time = Column(String(10))
    consumable = Column(String(255))
    additional_consumable = Column(String(255))
    qb = Column(Float)
    qd = Column(Float)
    tmp = Column(Float)
    uf_rate = Column(Float)
    clotting = Column(String(50))
    reason = Column(Text)
    heparin_dose = Column(String(50))
    iron_sucrose = Column(String(50))
    vitals_intervals = Column(JSON, default=list)

    # Post-dialysis
    post_date = Column(Date)
    post_time = Column(String(10))
    post_bp = Column(String(20))
    post_pulse = Column(Float)
    post_weight = Column(Float)
    post_temp = Column(Float)
    fluid_removed = Column(Float)
    finished_by = Column(String(100))

    signature_data = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
