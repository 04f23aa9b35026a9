from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import PostInfo, PostListResponse, PostResponse

POSTS_PAGE_SIZE = 100


class ListPostsUseCase:
    """Latest posts, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = POSTS_PAGE_SIZE) -> Result[PostListResponse]:
        async with self.uow:
            rows = await self.uow.posts.list_latest(limit)
            return Return.ok(
                PostListResponse(
                    posts=[PostInfo.from_entity(post, username) for post, username in rows]
                )
            )


class GetPostUseCase:
    """Single post with its author"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: UUID) -> Result[PostResponse]:
        async with self.uow:
            row = await self.uow.posts.get_with_author(post_id)
            if row is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            post, username = row
            return Return.ok(PostResponse(post=PostInfo.from_entity(post, username)))
