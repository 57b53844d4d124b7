import os

os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-secret-for-the-suite"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.pool import StaticPool

from dialysis_records.config import get_settings
from dialysis_records.database import Database
from dialysis_records.main import create_app

get_settings.cache_clear()

PASSWORD = "s3cret-pass"


@pytest.fixture
def client():
    database = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with TestClient(create_app(database=database)) as c:
        yield c


def signup(client, email, first_name="Test", last_name="Nurse"):
    """Register an account and return bearer headers for it."""
    response = client.post(
        "/auth/register",
        json={"first_name": first_name, "last_name": last_name, "email": email, "password": PASSWORD},
    )
    assert response.status_code == 201, response.text
    login = client.post("/auth/login", json={"email": email, "password": PASSWORD})
    assert login.status_code == 200, login.text
    return {"Authorization": f"Bearer {login.json()['token']}"}


def create_patient(client, headers, **fields):
    body = {"fullName": "Thandi Mokoena", "gender": "Female"}
    body.update(fields)
    response = client.post("/api/patients", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["patientId"]


def count_rows(client, model):
    """Count rows straight from the app's database, on the client's event loop."""
    database = client.app.state.database

    async def _count():
        async with database.session() as session:
            return await session.scalar(select(func.count()).select_from(model))

    return client.portal.call(_count)


@pytest.fixture
def headers(client):
    return signup(client, "nurse@clinic.test")


@pytest.fixture
def other_headers(client):
    return signup(client, "other@clinic.test", first_name="Other")


@pytest.fixture
def patient_id(client, headers):
    return create_patient(client, headers)
