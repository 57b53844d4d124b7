from sqlalchemy import Column, Integer, String, Date, Text, DateTime, Float, ForeignKey
from sqlalchemy.sql import func
from dialysis_records.database import Base


def _note_fk():
    return Column(Integer, ForeignKey("medical_notes.id", ondelete="CASCADE"), nullable=False, index=True)


class MedicalNote(Base):
    __tablename__ = "medical_notes"

    id = Column(Integer, primary_key=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    note_year = Column(Integer)
    note_month = Column(Integer)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class GeneralDetails(Base):
    __tablename__ = "general_details"

    id = Column(Integer, primary_key=True)
    note_id = _note_fk()
    name = Column(String(100))
    surname = Column(String(100))
    diagnosis = Column(String(255))
    medical_aid_name = Column(String(100))
    medical_aid_no = Column(String(50))
    doctor = Column(String(100))
    access = Column(String(50))
    needle_size = Column(String(20))
    port_length = Column(String(20))
    height = Column(Float)
    age = Column(Float)


class DialysisPrescription(Base):
    __tablename__ = "dialysis_prescription"

    id = Column(Integer, primary_key=True)
    note_id = _note_fk()
    dialyzer = Column(String(100))
    dry_weight = Column(Float)
    dialysate_speed_qd = Column(Float)
    blood_pump_speed_qb = Column(Float)
    treatment_hours = Column(Float)
    anticoagulation_and_dose = Column(String(255))


class SessionDetails(Base):
    __tablename__ = "session_details"

    id = Column(Integer, primary_key=True)
    note_id = _note_fk()
    date = Column(Date)
    time_on = Column(String(10))
    primed_by = Column(String(100))
    stock_utilised = Column(Text)


class PreAssessment(Base):
    __tablename__ = "pre_assessment"

    id = Column(Integer, primary_key=True)
    note_id = _note_fk()
    weight = Column(Float)
    blood_pressure = Column(String(20))
    pulse = Column(Float)
    blood_glucose = Column(Float)
    temperature = Column(Float)
    hgt = Column(Float)
    saturation = Column(Float)
    post_connection_bp = Column(String(20))


class PostDialysis(Base):
    __tablename__ = "post_dialysis"

    id = Column(Integer, primary_key=True)
    note_id = _note_fk()
    pre_disconnection_bp = Column(String(20))
    post_disconnection_bp = Column(String(20))
    w_post = Column(Float)
    qd_post = Column(Float)
    qb_post = Column(Float)
    uf = Column(Float)
    ktv = Column(Float)
    time_of = Column(String(10))
    disconnected_by = Column(String(100))
