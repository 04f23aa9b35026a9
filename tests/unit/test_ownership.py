from uuid import uuid4

from src.domain.ownership import check_ownership


def test_owner_is_allowed():
    user_id = uuid4()

    assert check_ownership(user_id, user_id) is None


def test_other_user_is_forbidden():
    error = check_ownership(uuid4(), uuid4())

    assert error.code == "FORBIDDEN"


def test_missing_resource_is_not_found():
    error = check_ownership(None, uuid4())

    assert error.code == "POST_NOT_FOUND"
    assert error.message == "Post not found"
