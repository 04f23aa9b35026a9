from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.api.utils.jwt import create_access_token
from tests.utils.auth_headers import bearer


@pytest.mark.asyncio
async def test_verify_valid_token(client: AsyncClient, signup, test_data):
    token, user_id = await signup(**test_data.get_copy("alice"))

    response = await client.post("/api/auth/verify", headers=bearer(token))

    assert response.status_code == 200
    assert response.json() == {"success": True, "user_id": user_id}


@pytest.mark.asyncio
async def test_verify_without_token(client: AsyncClient):
    response = await client.post("/api/auth/verify")

    assert response.status_code == 401
    assert response.json()["code"] == "AUTH_REQUIRED"


@pytest.mark.asyncio
async def test_verify_with_non_bearer_scheme(client: AsyncClient):
    response = await client.post("/api/auth/verify", headers={"Authorization": "Basic abc"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_verify_garbage_token(client: AsyncClient):
    response = await client.post("/api/auth/verify", headers=bearer("invalid_token_here"))

    assert response.status_code == 403
    assert response.json()["code"] == "TOKEN_MALFORMED"


@pytest.mark.asyncio
async def test_verify_expired_token(client: AsyncClient):
    token = create_access_token(str(uuid4()), timedelta(seconds=-5))

    response = await client.post("/api/auth/verify", headers=bearer(token))

    assert response.status_code == 403
    data = response.json()
    assert data["code"] == "TOKEN_EXPIRED"
    assert data["error"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_verify_tampered_token(client: AsyncClient, signup, test_data):
    token, _ = await signup(**test_data.get_copy("alice"))
    header, payload, signature = token.split(".")
    other_signature = create_access_token(str(uuid4()), timedelta(hours=1)).split(".")[2]

    response = await client.post(
        "/api/auth/verify", headers=bearer(f"{header}.{payload}.{other_signature}")
    )

    assert response.status_code == 403
    assert response.json()["code"] == "TOKEN_INVALID"
