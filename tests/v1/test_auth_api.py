# tests/v1/test_auth_api.py

import pytest
from httpx import AsyncClient

from app.core.security import create_access_token
from app.services import user as user_service

pytestmark = pytest.mark.asyncio


async def test_register_and_login(client: AsyncClient):
    payload = {
        "email": "fresh@example.com",
        "password": "longpassword",
        "first_name": "Fresh",
        "last_name": "Member",
    }
    response = await client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "fresh@example.com"
    assert "password_hash" not in data

    response = await client.post("/api/v1/auth/login", json={"email": "fresh@example.com", "password": "longpassword"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["id"] == data["id"]


async def test_register_duplicate_email(client: AsyncClient, test_user):
    payload = {"email": test_user.email, "password": "longpassword", "first_name": "A", "last_name": "B"}
    response = await client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "User with this email already exists"


async def test_register_validates_input(client: AsyncClient):
    payload = {"email": "not-an-email", "password": "short", "first_name": "", "last_name": "B"}
    response = await client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == 422


async def test_login_wrong_password(client: AsyncClient, test_user):
    response = await client.post("/api/v1/auth/login", json={"email": test_user.email, "password": "nope-nope"})
    assert response.status_code == 401


async def test_deactivated_user_is_forbidden(client: AsyncClient, db_session, test_user, user_auth_headers):
    user_service.deactivate_user(db_session, test_user.id)

    response = await client.post("/api/v1/auth/login", json={"email": test_user.email, "password": "password123"})
    assert response.status_code == 403

    response = await client.get("/api/v1/users/me", headers=user_auth_headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Account is deactivated"


async def test_invalid_token_is_rejected(client: AsyncClient, test_user):
    response = await client.get("/api/v1/users/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


async def test_update_profile(client: AsyncClient, test_user, user_auth_headers):
    response = await client.put("/api/v1/users/me", json={"phone": "+15550001"}, headers=user_auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["phone"] == "+15550001"
    assert data["first_name"] == "Jane"


async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_token_with_non_numeric_subject_is_rejected(client: AsyncClient):
    token = create_access_token(data={"sub": "admin"})
    response = await client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
