import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import ChatMessage, Post, PostLike, User
from tests.utils.auth_headers import bearer


@pytest.mark.asyncio
async def test_delete_account_cascades(client: AsyncClient, signup, db_session, test_data):
    """Deleting bob removes his posts, chats and likes and fixes alice's counter"""
    alice_token, _ = await signup(**test_data.get_copy("alice"))
    bob_token, bob_id = await signup(**test_data.get_copy("bob"))

    alice_post = (
        await client.post("/api/posts", json=test_data.get_copy("hello_post"), headers=bearer(alice_token))
    ).json()["post"]
    bob_post = (
        await client.post("/api/posts", json={"title": "Bob", "content": "Post"}, headers=bearer(bob_token))
    ).json()["post"]
    await client.post(f"/api/posts/{alice_post['id']}/like", headers=bearer(bob_token))
    await client.post(f"/api/posts/{bob_post['id']}/like", headers=bearer(alice_token))
    await client.post("/api/chats", json={"message": "bye"}, headers=bearer(bob_token))

    response = await client.delete("/api/auth/account", headers=bearer(bob_token))

    assert response.status_code == 200
    assert response.json()["success"] is True

    assert (await db_session.exec(select(User).where(User.username == "bob"))).all() == []
    assert (await db_session.exec(select(Post).where(Post.title == "Bob"))).all() == []
    assert (await db_session.exec(select(ChatMessage))).all() == []
    assert (await db_session.exec(select(PostLike))).all() == []

    post = (await client.get(f"/api/posts/{alice_post['id']}")).json()["post"]
    assert post["likes"] == 0


@pytest.mark.asyncio
async def test_token_outlives_deleted_account(client: AsyncClient, signup, test_data):
    """Known limitation: no revocation, the token verifies until it expires"""
    token, user_id = await signup(**test_data.get_copy("alice"))
    await client.delete("/api/auth/account", headers=bearer(token))

    verify = await client.post("/api/auth/verify", headers=bearer(token))
    again = await client.delete("/api/auth/account", headers=bearer(token))
    create = await client.post(
        "/api/posts", json=test_data.get_copy("hello_post"), headers=bearer(token)
    )

    assert verify.status_code == 200
    assert verify.json()["user_id"] == user_id
    assert again.status_code == 404
    assert create.status_code == 404
    assert create.json()["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_account_requires_token(client: AsyncClient):
    response = await client.delete("/api/auth/account")

    assert response.status_code == 401
