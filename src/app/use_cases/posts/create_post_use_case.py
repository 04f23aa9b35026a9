from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Post
from src.domain.result import Error, Result, Return
from src.domain.validators import validate_post
from .dtos import PostCommand, PostInfo, PostResponse


class CreatePostUseCase:
    """
    Use case for publishing a new post.

    Business Rules:
    - Title is required and at most 255 characters
    - Content is required
    - New posts start with zero likes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: PostCommand) -> Result[PostResponse]:
        error = validate_post(command.title, command.content)
        if error:
            return Return.err(error)

        async with self.uow:
            # The token may outlive the account it was issued for
            author = await self.uow.users.get_by_id(user_id)
            if author is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            post = Post(user_id=user_id, title=command.title, content=command.content)
            post = await self.uow.posts.create(post)
            await self.uow.commit()

            return Return.ok(
                PostResponse(
                    message="Post created",
                    post=PostInfo.from_entity(post, author.username),
                )
            )
