from uuid import uuid4

import pytest

from src.app.use_cases.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostCommand,
    UpdatePostUseCase,
)
from src.domain.entities import Post, User


@pytest.fixture
def alice():
    return User(id=uuid4(), username="alice_1", password_hash="x")


@pytest.fixture
def alice_post(alice):
    return Post(id=uuid4(), user_id=alice.id, title="Hello", content="World", likes=2)


@pytest.mark.asyncio
async def test_create_post(mock_uow, alice):
    mock_uow.users.get_by_id.return_value = alice

    result = await CreatePostUseCase(mock_uow).execute(
        alice.id, PostCommand(title="Hello", content="World")
    )

    assert result.is_ok()
    post = result.value.post
    assert post.title == "Hello"
    assert post.likes == 0
    assert post.username == "alice_1"
    assert post.user_id == str(alice.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_post_title_too_long(mock_uow, alice):
    result = await CreatePostUseCase(mock_uow).execute(
        alice.id, PostCommand(title="T" * 256, content="World")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.posts.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_post_for_deleted_account(mock_uow):
    result = await CreatePostUseCase(mock_uow).execute(
        uuid4(), PostCommand(title="Hello", content="World")
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.posts.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_own_post(mock_uow, alice, alice_post):
    mock_uow.posts.get_with_author.return_value = (alice_post, alice.username)
    original_updated_at = alice_post.updated_at

    result = await UpdatePostUseCase(mock_uow).execute(
        alice.id, alice_post.id, PostCommand(title="New", content="Body")
    )

    assert result.is_ok()
    assert result.value.post.title == "New"
    assert result.value.post.content == "Body"
    assert result.value.post.likes == 2
    assert alice_post.updated_at >= original_updated_at
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "command",
    [
        PostCommand(title="New", content="Body"),
        PostCommand(title="", content=None),
        PostCommand(title=123, content=["x"]),
    ],
)
async def test_update_other_users_post_is_forbidden(mock_uow, alice, alice_post, command):
    mock_uow.posts.get_with_author.return_value = (alice_post, alice.username)

    result = await UpdatePostUseCase(mock_uow).execute(uuid4(), alice_post.id, command)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.posts.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_missing_post(mock_uow, alice):
    result = await UpdatePostUseCase(mock_uow).execute(
        alice.id, uuid4(), PostCommand(title="New", content="Body")
    )

    assert result.is_err()
    assert result.error.code == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_own_post_with_invalid_payload(mock_uow, alice, alice_post):
    mock_uow.posts.get_with_author.return_value = (alice_post, alice.username)

    result = await UpdatePostUseCase(mock_uow).execute(
        alice.id, alice_post.id, PostCommand(title="New", content="")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    assert alice_post.content == "World"
    mock_uow.posts.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_own_post_removes_likes_too(mock_uow, alice, alice_post):
    mock_uow.posts.get_by_id.return_value = alice_post

    result = await DeletePostUseCase(mock_uow).execute(alice.id, alice_post.id)

    assert result.is_ok()
    mock_uow.post_likes.delete_by_posts.assert_called_once_with([alice_post.id])
    mock_uow.posts.delete.assert_called_once_with(alice_post)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_other_users_post_is_forbidden(mock_uow, alice_post):
    mock_uow.posts.get_by_id.return_value = alice_post

    result = await DeletePostUseCase(mock_uow).execute(uuid4(), alice_post.id)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.posts.delete.assert_not_called()


@pytest.mark.asyncio
async def test_get_and_list_posts(mock_uow, alice, alice_post):
    mock_uow.posts.get_with_author.return_value = (alice_post, alice.username)
    mock_uow.posts.list_latest.return_value = [(alice_post, alice.username)]

    single = await GetPostUseCase(mock_uow).execute(alice_post.id)
    listing = await ListPostsUseCase(mock_uow).execute()

    assert single.value.post.id == str(alice_post.id)
    assert [p.id for p in listing.value.posts] == [str(alice_post.id)]
    mock_uow.posts.list_latest.assert_called_once_with(100)


@pytest.mark.asyncio
async def test_get_missing_post(mock_uow):
    result = await GetPostUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "POST_NOT_FOUND"
