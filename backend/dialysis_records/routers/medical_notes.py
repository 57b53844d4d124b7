from fastapi import APIRouter, Depends

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import Database, get_database
from dialysis_records.schemas.medical_note import MedicalNoteCreate, MedicalNoteRow
from dialysis_records.services.medical_notes_service import medical_notes_service

router = APIRouter()


@router.post("/medical-notes", status_code=201)
async def create_medical_note(
    data: MedicalNoteCreate,
    database: Database = Depends(get_database),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    note_id = await medical_notes_service.create(database, data, current_user)
    return {"message": "Medical note saved successfully!", "noteId": note_id}


@router.get("/medical-notes", response_model=list[MedicalNoteRow])
async def list_medical_notes(
    database: Database = Depends(get_database),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    return await medical_notes_service.list_for(database, current_user)
