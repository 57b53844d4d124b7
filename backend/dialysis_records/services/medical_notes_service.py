"""
Legacy medical notes.

One note is spread over six tables. The header row is inserted first to get
its id, then the five detail rows; all of it commits or none of it does.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from dialysis_records.auth import AccountPrincipal
from dialysis_records.database import Database
from dialysis_records.models.medical_note import (
    DialysisPrescription, GeneralDetails, MedicalNote, PostDialysis, PreAssessment, SessionDetails,
)
from dialysis_records.schemas.medical_note import MedicalNoteCreate, MedicalNoteRow
from dialysis_records.services.records import translate_db_error

logger = logging.getLogger(__name__)

DETAIL_TABLES = (GeneralDetails, DialysisPrescription, SessionDetails, PreAssessment, PostDialysis)


def _columns_for(model, values: dict) -> dict:
    names = {c.name for c in model.__table__.columns} - {"id", "note_id"}
    return {k: v for k, v in values.items() if k in names}


class MedicalNotesService:
    async def create(self, database: Database, data: MedicalNoteCreate, user: AccountPrincipal) -> int:
        values = data.model_dump()
        async with database.session() as session:
            try:
                async with session.begin():
                    note = MedicalNote(
                        created_by=user.id,
                        note_year=values.pop("note_year"),
                        note_month=values.pop("note_month"),
                    )
                    session.add(note)
                    await session.flush()

                    session.add_all(
                        model(note_id=note.id, **_columns_for(model, values)) for model in DETAIL_TABLES
                    )
                    await session.flush()
            except SQLAlchemyError as e:
                logger.error("Medical note transaction rolled back")
                raise translate_db_error(e, "medical note") from e

        logger.info("Medical note %s saved by user %s", note.id, user.id)
        return note.id

    async def list_for(self, database: Database, user: AccountPrincipal) -> list[MedicalNoteRow]:
        query = (
            select(
                MedicalNote.id,
                MedicalNote.note_year,
                MedicalNote.note_month,
                GeneralDetails.name,
                GeneralDetails.surname,
                GeneralDetails.diagnosis,
                GeneralDetails.doctor,
                SessionDetails.date,
                DialysisPrescription.dialyzer,
                PreAssessment.weight,
            )
            .join(GeneralDetails, GeneralDetails.note_id == MedicalNote.id)
            .join(DialysisPrescription, DialysisPrescription.note_id == MedicalNote.id)
            .join(SessionDetails, SessionDetails.note_id == MedicalNote.id)
            .join(PreAssessment, PreAssessment.note_id == MedicalNote.id)
            .where(MedicalNote.created_by == user.id)
            .order_by(SessionDetails.date.desc(), MedicalNote.id.desc())
        )
        async with database.session() as session:
            result = await session.execute(query)
            return [MedicalNoteRow(**row._mapping) for row in result.all()]


medical_notes_service = MedicalNotesService()
