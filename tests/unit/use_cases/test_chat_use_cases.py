from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.chats import ChatCommand, CreateChatUseCase, ListChatsUseCase
from src.domain.entities import ChatMessage, User


@pytest.fixture
def alice():
    return User(id=uuid4(), username="alice_1", password_hash="x")


@pytest.mark.asyncio
async def test_create_chat(mock_uow, alice):
    mock_uow.users.get_by_id.return_value = alice

    result = await CreateChatUseCase(mock_uow).execute(alice.id, ChatCommand(message="hi all"))

    assert result.is_ok()
    assert result.value.chat.message == "hi all"
    assert result.value.chat.username == "alice_1"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_chat_of_501_characters_is_rejected(mock_uow, alice):
    mock_uow.users.get_by_id.return_value = alice

    result = await CreateChatUseCase(mock_uow).execute(alice.id, ChatCommand(message="x" * 501))

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.chats.create.assert_not_called()


@pytest.mark.asyncio
async def test_whitespace_chat_is_rejected(mock_uow, alice):
    result = await CreateChatUseCase(mock_uow).execute(alice.id, ChatCommand(message="   "))

    assert result.error.code == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_list_chats_oldest_first(mock_uow, alice):
    now = datetime(2024, 1, 1, 12, 0, 0)
    newest = ChatMessage(id=uuid4(), user_id=alice.id, message="second", created_at=now)
    oldest = ChatMessage(
        id=uuid4(), user_id=alice.id, message="first", created_at=now - timedelta(minutes=1)
    )
    mock_uow.chats.list_latest.return_value = [(newest, "alice_1"), (oldest, "alice_1")]

    result = await ListChatsUseCase(mock_uow).execute()

    assert [c.message for c in result.value.chats] == ["first", "second"]
    mock_uow.chats.list_latest.assert_called_once_with(100)
