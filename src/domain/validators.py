"""
Input Validators

Pure checks on user-supplied fields. Each returns None when the value is
acceptable, or an INVALID_INPUT Error with a message the user can act on.
"""

import re
from typing import Any, Optional

from src.domain.result import Error

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
TITLE_MAX_LENGTH = 255
CHAT_MESSAGE_MAX_LENGTH = 500

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


def _invalid(message: str) -> Error:
    return Error("INVALID_INPUT", message)


def validate_username(username: Optional[str]) -> Optional[Error]:
    if not username:
        return _invalid("Username is required")
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return _invalid(
            f"Username must be between {USERNAME_MIN_LENGTH} and "
            f"{USERNAME_MAX_LENGTH} characters"
        )
    if not _USERNAME_PATTERN.match(username):
        return _invalid("Username may only contain letters, numbers and underscores")
    return None


def validate_password(password: Optional[str]) -> Optional[Error]:
    if not password:
        return _invalid("Password is required")
    if len(password) < PASSWORD_MIN_LENGTH:
        return _invalid(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
        )
    return None


def validate_post_title(title: Any) -> Optional[Error]:
    if title is not None and not isinstance(title, str):
        return _invalid("Title must be text")
    if not title:
        return _invalid("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        return _invalid(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return None


def validate_post_content(content: Any) -> Optional[Error]:
    if content is not None and not isinstance(content, str):
        return _invalid("Content must be text")
    if not content:
        return _invalid("Content is required")
    return None


def validate_chat_message(message: Optional[str]) -> Optional[Error]:
    if not message or not message.strip():
        return _invalid("Message is required")
    if len(message) > CHAT_MESSAGE_MAX_LENGTH:
        return _invalid(
            f"Message must be at most {CHAT_MESSAGE_MAX_LENGTH} characters"
        )
    return None


def validate_post(title: Any, content: Any) -> Optional[Error]:
    """Title first, then content; the first failing rule wins."""
    return validate_post_title(title) or validate_post_content(content)


def validate_credentials(
    username: Optional[str], password: Optional[str]
) -> Optional[Error]:
    return validate_username(username) or validate_password(password)
