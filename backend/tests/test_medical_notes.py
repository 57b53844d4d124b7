from sqlalchemy.exc import OperationalError

from dialysis_records.models.medical_note import (
    DialysisPrescription, GeneralDetails, MedicalNote, PostDialysis, PreAssessment, SessionDetails,
)
from dialysis_records.services import medical_notes_service as notes_module

from conftest import count_rows

NOTE = {
    "note_year": "2026",
    "note_month": 10,
    "name": "Lindiwe",
    "surname": "Mthembu",
    "diagnosis": "CKD 5",
    "doctor": "Dr Pillay",
    "height": "162 cm",
    "dialyzer": "FX60",
    "dry_weight": "65 kg",
    "treatment_hours": "4h",
    "date": "2026-10-01",
    "time_on": "07:45",
    "weight": "67.2kg",
    "blood_pressure": "150/90",
    "ktv": "1.25",
    "disconnected_by": "RN Dube",
}


def test_create_note_writes_every_table(client, headers):
    response = client.post("/api/medical-notes", json=NOTE, headers=headers)
    assert response.status_code == 201
    assert isinstance(response.json()["noteId"], int)

    for model in (MedicalNote, GeneralDetails, DialysisPrescription, SessionDetails, PreAssessment, PostDialysis):
        assert count_rows(client, model) == 1


def test_list_notes_newest_first(client, headers, other_headers):
    client.post("/api/medical-notes", json=NOTE, headers=headers)
    client.post("/api/medical-notes", json={**NOTE, "date": "2026-10-08", "name": "Later"}, headers=headers)
    client.post("/api/medical-notes", json={**NOTE, "name": "Someone else"}, headers=other_headers)

    rows = client.get("/api/medical-notes", headers=headers).json()
    assert [r["name"] for r in rows] == ["Later", "Lindiwe"]
    assert rows[1]["weight"] == 67.2
    assert rows[1]["note_year"] == 2026
    assert rows[1]["date"] == "2026-10-01"


def test_note_rejects_unknown_keys(client, headers):
    response = client.post("/api/medical-notes", json={**NOTE, "noteYear": 2026}, headers=headers)
    assert response.status_code == 400


def test_failed_note_leaves_no_rows(client, headers, monkeypatch):
    real_columns_for = notes_module._columns_for

    def failing_columns_for(model, values):
        if model is PostDialysis:
            raise OperationalError("INSERT INTO post_dialysis", {}, Exception("disk I/O error"))
        return real_columns_for(model, values)

    monkeypatch.setattr(notes_module, "_columns_for", failing_columns_for)

    response = client.post("/api/medical-notes", json=NOTE, headers=headers)
    assert response.status_code == 500
    assert response.json()["error"] == "PersistenceError"
    assert response.json()["details"] == "disk I/O error"

    assert count_rows(client, MedicalNote) == 0
    assert count_rows(client, GeneralDetails) == 0


def test_notes_require_auth(client):
    assert client.get("/api/medical-notes").status_code == 401
