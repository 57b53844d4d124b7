import re

import pytest

from conftest import create_patient


# Dialysis charts

def chart_body(patient_id, **extra):
    body = {
        "patientId": str(patient_id),
        "planType": "Chronic",
        "preDate": "2026-10-01",
        "preHB": "10.5",
        "preBP": "140/90",
        "preWeight": "71 kg",
        "vitalsIntervals": [{"time": "09:00", "bp": "130/85", "pulse": "78"}],
        "postBP": "120/80",
        "fluidRemoved": "2.1L",
    }
    body.update(extra)
    return body


@pytest.mark.parametrize("path", ["/api/dialysis/chart", "/api/dialysis/save"])
def test_save_chart_on_both_paths(client, headers, patient_id, path):
    response = client.post(path, json=chart_body(patient_id), headers=headers)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Dialysis Chart saved successfully!"
    assert isinstance(body["chartId"], int)


def test_list_charts(client, headers, patient_id):
    client.post("/api/dialysis/chart", json=chart_body(patient_id), headers=headers)
    client.post("/api/dialysis/save", json=chart_body(patient_id, finishedBy="RN Dube"), headers=headers)

    charts = client.get(f"/api/dialysis/{patient_id}/charts", headers=headers).json()
    assert len(charts) == 2
    assert charts[0]["finished_by"] == "RN Dube"
    assert charts[1]["pre_weight"] == 71.0
    assert charts[1]["fluid_removed"] == 2.1
    assert charts[1]["vitals_intervals"][0]["bp"] == "130/85"


def test_chart_requires_auth(client, patient_id):
    assert client.post("/api/dialysis/save", json=chart_body(patient_id)).status_code == 401


def test_chart_requires_patient(client, headers):
    body = chart_body(1)
    del body["patientId"]
    response = client.post("/api/dialysis/chart", json=body, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_chart_for_missing_patient(client, headers):
    response = client.post("/api/dialysis/chart", json=chart_body(5150), headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "ForeignKeyViolation"


# Equipment maintenance

def test_maintenance_create_and_list(client, headers):
    for day in ("2026-07-01", "2026-09-01"):
        response = client.post(
            "/api/equipment/maintenance",
            json={
                "machineMake": "Fresenius 4008S",
                "serialNumber": "SN-1001",
                "maintenanceDate": day,
                "company": "MedTech",
                "staff": "J. Naidoo",
                "disinfectionTime": "2026-09-01T07:30:00",
            },
            headers=headers,
        )
        assert response.status_code == 201
        assert response.json()["record"]["performed_by_company"] == "MedTech"

    rows = client.get("/api/equipment/maintenance", headers=headers).json()
    assert [r["maintenance_date"] for r in rows] == ["2026-09-01", "2026-07-01"]
    assert rows[0]["performed_by_staff"] == "J. Naidoo"


def test_maintenance_requires_serial_number(client, headers):
    response = client.post(
        "/api/equipment/maintenance",
        json={"machineMake": "Nipro", "maintenanceDate": "2026-09-01"},
        headers=headers,
    )
    assert response.status_code == 400


def test_maintenance_requires_auth(client):
    assert client.get("/api/equipment/maintenance").status_code == 401


# Medication and co-morbidities

@pytest.mark.parametrize("path", ["/api/medication", "/api/medication/records"])
def test_medication_create_and_list(client, headers, patient_id, path):
    response = client.post(
        path,
        json={
            "patientId": patient_id,
            "medicationSpecify": "Erythropoietin",
            "diabetic": "Y",
            "cardio": "N",
            "otherCoMorbiditySpecify": "Gout",
        },
        headers=headers,
    )
    assert response.status_code == 201
    assert response.json()["message"].endswith(f"Patient {patient_id}")

    [row] = client.get("/api/medication/records", params={"patientId": patient_id}, headers=headers).json()
    assert row["diabetic"] is True
    assert row["cardio"] is False
    assert row["cancer"] is False
    assert row["other_comorbidity_specify"] == "Gout"


def test_medication_null_flags_store_false(client, headers, patient_id):
    response = client.post(
        "/api/medication",
        json={"patientId": patient_id, "diabetic": None, "cancer": None, "cardio": "Y"},
        headers=headers,
    )
    assert response.status_code == 201

    [row] = client.get("/api/medication/records", params={"patientId": patient_id}, headers=headers).json()
    assert row["diabetic"] is False
    assert row["cancer"] is False
    assert row["pulmonary"] is False
    assert row["cardio"] is True


def test_medication_requires_patient(client, headers):
    response = client.post("/api/medication", json={"diabetic": "Y"}, headers=headers)
    assert response.status_code == 400


# Patient management

def test_management_create_and_list(client, headers, patient_id, other_headers):
    response = client.post(
        "/api/patient-management",
        json={
            "patientId": patient_id,
            "lastFluVaccineDate": "2026-03-15T10:00:00.000Z",
            "fistulaCondition": "Good",
            "otherManagementSpecify": "Refer to dietician",
        },
        headers=headers,
    )
    assert response.status_code == 201
    assert isinstance(response.json()["recordId"], int)

    [row] = client.get("/api/patient-management", params={"patientId": patient_id}, headers=headers).json()
    assert row["last_flu_vaccine_date"] == "2026-03-15"
    assert row["last_dietician_visit_date"] is None
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", row["recorded_at"])

    assert client.get("/api/patient-management", headers=other_headers).json() == []


def test_management_for_other_accounts_patient(client, patient_id, other_headers):
    response = client.post("/api/patient-management", json={"patientId": patient_id}, headers=other_headers)
    assert response.status_code == 404


# Monthly reports

def test_report_create_and_list(client, headers):
    patient_id = create_patient(client, headers, fullName="Kagiso Molefe")
    response = client.post(
        "/api/reports",
        json={
            "patientId": patient_id,
            "sessionsActual": "12",
            "sessionsPlanned": 13,
            "ktvPerPatient": "1.3",
            "haemoglobin": "10.9 g/dL",
        },
        headers=headers,
    )
    assert response.status_code == 201
    assert isinstance(response.json()["reportId"], int)

    [row] = client.get("/api/reports", headers=headers).json()
    assert row["full_name"] == "Kagiso Molefe"
    assert row["sessions_actual"] == 12
    assert row["haemoglobin"] == 10.9
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", row["recorded_date"])


def test_report_requires_session_counts(client, headers, patient_id):
    response = client.post("/api/reports", json={"patientId": patient_id, "sessionsActual": 12}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


# Clinical progress log

def log_entry(**extra):
    entry = {
        "dateTime": "19/10/2026, 08:15:00",
        "action": "Cannulation",
        "notes": "Two needles, good flow",
        "signatureText": "T. Mokoena",
        "qualification": "RN",
    }
    entry.update(extra)
    return entry


def test_progress_log_batch(client, headers, patient_id):
    response = client.post(
        "/api/clinical-progress/log",
        json={"patientId": patient_id, "logEntries": [log_entry(), log_entry(action="Disconnection")]},
        headers=headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert len(body["records"]) == 2
    assert {r["batch_id"] for r in body["records"]} == {body["batchId"]}

    rows = client.get(f"/api/clinical-progress/{patient_id}", headers=headers).json()
    assert {r["log_date_time_action"] for r in rows} == {"Cannulation", "Disconnection"}
    assert rows[0]["entry_date_time"] == "19/10/2026, 08:15:00"


def test_progress_log_requires_entries(client, headers, patient_id):
    response = client.post("/api/clinical-progress/log", json={"patientId": patient_id, "logEntries": []}, headers=headers)
    assert response.status_code == 400


def test_progress_log_entry_requires_notes(client, headers, patient_id):
    response = client.post(
        "/api/clinical-progress/log",
        json={"patientId": patient_id, "logEntries": [log_entry(notes="  ")]},
        headers=headers,
    )
    assert response.status_code == 400


def test_progress_log_hidden_from_other_accounts(client, headers, other_headers, patient_id):
    client.post("/api/clinical-progress/log", json={"patientId": patient_id, "logEntries": [log_entry()]}, headers=headers)
    response = client.get(f"/api/clinical-progress/{patient_id}", headers=other_headers)
    assert response.status_code == 404
