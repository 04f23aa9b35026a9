"""
Ownership Enforcement

A resource may only be mutated by the user recorded as its creator.
"""

from typing import Optional
from uuid import UUID

from src.domain.result import Error


def check_ownership(
    resource_owner_id: Optional[UUID],
    authenticated_user_id: UUID,
    resource_name: str = "Post",
) -> Optional[Error]:
    """
    Confirm the authenticated user owns the resource.

    Args:
        resource_owner_id: Owner recorded on the resource, or None when the
            resource does not exist
        authenticated_user_id: User id taken from the verified token
        resource_name: Used to build the error code and message

    Returns:
        None when allowed, NOT_FOUND error when the resource is missing,
        FORBIDDEN error when it belongs to someone else
    """
    if resource_owner_id is None:
        return Error(
            f"{resource_name.upper()}_NOT_FOUND", f"{resource_name} not found"
        )

    if resource_owner_id != authenticated_user_id:
        return Error(
            "FORBIDDEN",
            f"You can only modify your own {resource_name.lower()}s",
        )

    return None
