from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.ownership import check_ownership
from src.domain.result import Result, Return
from src.domain.validators import validate_post
from .dtos import PostCommand, PostInfo, PostResponse


class UpdatePostUseCase:
    """
    Use case for editing a post.

    Business Rules:
    - Missing post yields POST_NOT_FOUND
    - Only the owner may edit; everyone else gets FORBIDDEN whatever the
      payload looks like, so ownership is checked before validation
    - Title and content follow the same rules as on creation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, post_id: UUID, command: PostCommand
    ) -> Result[PostResponse]:
        async with self.uow:
            row = await self.uow.posts.get_with_author(post_id)
            post, username = row if row is not None else (None, None)

            error = check_ownership(post.user_id if post else None, user_id)
            if error:
                return Return.err(error)

            error = validate_post(command.title, command.content)
            if error:
                return Return.err(error)

            post.title = command.title
            post.content = command.content
            post.updated_at = utcnow()
            post = await self.uow.posts.update(post)
            await self.uow.commit()

            return Return.ok(
                PostResponse(
                    message="Post updated",
                    post=PostInfo.from_entity(post, username),
                )
            )
