import time

import pytest
from jose import jwt

from dialysis_records.auth import ALGORITHM, verify
from dialysis_records.config import DEFAULT_JWT_SECRET, Settings, get_settings
from dialysis_records.exceptions import Unauthorized
from dialysis_records.main import create_app

from conftest import PASSWORD, signup


def test_register_returns_account(client):
    response = client.post(
        "/auth/register",
        json={"first_name": "Ann", "last_name": "Lee", "email": "Ann@Clinic.test", "password": PASSWORD},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["msg"] == "User registered successfully"
    assert body["user"]["email"] == "ann@clinic.test"
    assert isinstance(body["user"]["id"], int)


def test_register_duplicate_email(client):
    signup(client, "dup@clinic.test")
    response = client.post(
        "/auth/register",
        json={"first_name": "Ann", "last_name": "Lee", "email": "dup@clinic.test", "password": "other"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "DuplicateEmail"


def test_register_missing_field(client):
    response = client.post("/auth/register", json={"email": "x@clinic.test", "password": "pw"})
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_login_returns_token(client):
    signup(client, "login@clinic.test")
    response = client.post("/auth/login", json={"email": "login@clinic.test", "password": PASSWORD})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 3600

    claims = jwt.decode(body["token"], get_settings().jwt_secret, algorithms=[ALGORITHM])
    assert claims["email"] == "login@clinic.test"
    assert claims["exp"] > time.time()


@pytest.mark.parametrize("email,password", [
    ("login@clinic.test", "wrong-password"),
    ("nobody@clinic.test", PASSWORD),
])
def test_login_rejects_bad_credentials(client, email, password):
    signup(client, "login@clinic.test")
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 400
    assert response.json() == {"error": "InvalidCredentials", "message": "Invalid Credentials"}


def test_protected_route_requires_token(client):
    response = client.get("/api/patients")
    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"


@pytest.mark.parametrize("value", ["Bearer null", "Bearer undefined", "Bearer not-a-jwt", "Token abc"])
def test_protected_route_rejects_bad_header(client, value):
    response = client.get("/api/patients", headers={"Authorization": value})
    assert response.status_code == 401


def test_legacy_header_is_accepted(client):
    headers = signup(client, "legacy@clinic.test")
    token = headers["Authorization"].split()[1]
    response = client.get("/api/patients", headers={"x-auth-token": token})
    assert response.status_code == 200


def test_expired_token_rejected(client):
    signup(client, "late@clinic.test")
    token = jwt.encode(
        {"sub": "1", "email": "late@clinic.test", "exp": int(time.time()) - 10},
        get_settings().jwt_secret,
        algorithm=ALGORITHM,
    )
    response = client.get("/api/patients", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode({"sub": "1", "email": "a@b.c", "exp": int(time.time()) + 60}, "elsewhere", algorithm=ALGORITHM)
    with pytest.raises(Unauthorized):
        verify(token)


def test_production_refuses_default_secret():
    settings = Settings(environment="production", jwt_secret=DEFAULT_JWT_SECRET)
    with pytest.raises(RuntimeError):
        create_app(settings=settings)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["apiBaseUrl"] == get_settings().public_api_base_url
    assert response.headers["Cache-Control"].startswith("no-store")
