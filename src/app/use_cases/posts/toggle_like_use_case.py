"""
Like Use Cases

Per (user, post) pair the like state is either liked or not-liked. A
toggle flips it, changing the PostLike relation and the post's counter in
one transaction so Post.likes always equals the number of relations.
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PostLike
from src.domain.result import Error, Result, Return
from .dtos import LikeStatusResponse, LikeToggleResponse

POST_NOT_FOUND = Error("POST_NOT_FOUND", "Post not found")
LIKE_CONFLICT = Error("LIKE_CONFLICT", "Like state changed concurrently, try again")


class ToggleLikeUseCase:
    """
    Use case for liking or unliking a post.

    Business Rules:
    - Post must exist; checked before the relation is touched
    - not-liked -> liked: insert relation, likes + 1
    - liked -> not-liked: delete relation, likes - 1
    - A concurrent toggle that already inserted the relation makes the
      unique constraint fail; the whole unit rolls back (LIKE_CONFLICT)
    - A concurrent toggle that already removed the relation leaves nothing
      to delete; the counter is left alone and the unit rolls back
      (LIKE_CONFLICT)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, post_id: UUID) -> Result[LikeToggleResponse]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.err(POST_NOT_FOUND)

            if await self.uow.users.get_by_id(user_id) is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            existing = await self.uow.post_likes.get(user_id, post_id)

            try:
                if existing is not None:
                    if not await self.uow.post_likes.delete(user_id, post_id):
                        # Another toggle removed it after our read
                        return Return.err(LIKE_CONFLICT)
                    likes = await self.uow.posts.adjust_likes(post_id, -1)
                    liked = False
                else:
                    await self.uow.post_likes.create(
                        PostLike(user_id=user_id, post_id=post_id)
                    )
                    likes = await self.uow.posts.adjust_likes(post_id, 1)
                    liked = True

                await self.uow.commit()
            except IntegrityError:
                return Return.err(LIKE_CONFLICT)

            return Return.ok(LikeToggleResponse(liked=liked, likes=likes))


class GetLikeStatusUseCase:
    """Whether the user currently likes the post"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, post_id: UUID) -> Result[LikeStatusResponse]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.err(POST_NOT_FOUND)

            existing = await self.uow.post_likes.get(user_id, post_id)
            return Return.ok(LikeStatusResponse(liked=existing is not None))
