"""
Delete Account Use Case

Removes a user together with everything they created.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import DeleteAccountResponse

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Use case for deleting the authenticated user's account.

    Business Rules:
    - Likes the user gave to other users' posts are withdrawn and those
      posts' like counters decremented
    - The user's posts (with any likes on them), chat messages and user
      row are deleted
    - Everything happens in one transaction
    - Tokens already issued to the user stay valid until they expire
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[DeleteAccountResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            own_post_ids = await self.uow.posts.list_ids_by_user(user_id)
            liked_post_ids = await self.uow.post_likes.list_post_ids_by_user(user_id)

            # Counters on the user's own posts go away with the posts
            own = set(own_post_ids)
            foreign_liked = [pid for pid in liked_post_ids if pid not in own]
            await self.uow.posts.decrement_likes(foreign_liked)

            await self.uow.post_likes.delete_by_user(user_id)
            await self.uow.post_likes.delete_by_posts(own_post_ids)
            await self.uow.posts.delete_by_user(user_id)
            await self.uow.chats.delete_by_user(user_id)
            await self.uow.users.delete(user)

            await self.uow.commit()

            logger.info(
                f"Account deleted: {user_id} "
                f"(posts={len(own_post_ids)}, likes={len(liked_post_ids)})"
            )

            return Return.ok(DeleteAccountResponse(message="Account deleted"))
