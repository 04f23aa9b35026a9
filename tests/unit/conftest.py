import pytest
from unittest.mock import AsyncMock, MagicMock

from config import ApplicationConfig


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.posts = MagicMock()
    uow.posts.get_by_id = AsyncMock(return_value=None)
    uow.posts.get_with_author = AsyncMock(return_value=None)
    uow.posts.list_latest = AsyncMock(return_value=[])
    uow.posts.create = AsyncMock(side_effect=lambda post: post)
    uow.posts.update = AsyncMock(side_effect=lambda post: post)
    uow.posts.delete = AsyncMock()
    uow.posts.adjust_likes = AsyncMock()
    uow.posts.decrement_likes = AsyncMock(return_value=0)
    uow.posts.list_ids_by_user = AsyncMock(return_value=[])
    uow.posts.delete_by_user = AsyncMock(return_value=0)

    uow.post_likes = MagicMock()
    uow.post_likes.get = AsyncMock(return_value=None)
    uow.post_likes.create = AsyncMock(side_effect=lambda like: like)
    uow.post_likes.delete = AsyncMock(return_value=1)
    uow.post_likes.list_post_ids_by_user = AsyncMock(return_value=[])
    uow.post_likes.delete_by_user = AsyncMock(return_value=0)
    uow.post_likes.delete_by_posts = AsyncMock(return_value=0)

    uow.chats = MagicMock()
    uow.chats.create = AsyncMock(side_effect=lambda chat: chat)
    uow.chats.list_latest = AsyncMock(return_value=[])
    uow.chats.delete_by_user = AsyncMock(return_value=0)

    return uow
