from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.ownership import check_ownership
from src.domain.result import Result, Return
from .dtos import DeletePostResponse


class DeletePostUseCase:
    """
    Use case for deleting a post.

    Business Rules:
    - Missing post yields POST_NOT_FOUND, someone else's post FORBIDDEN
    - The post's likes are removed in the same transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, post_id: UUID) -> Result[DeletePostResponse]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)

            error = check_ownership(post.user_id if post else None, user_id)
            if error:
                return Return.err(error)

            await self.uow.post_likes.delete_by_posts([post.id])
            await self.uow.posts.delete(post)
            await self.uow.commit()

            return Return.ok(DeletePostResponse(message="Post deleted"))
