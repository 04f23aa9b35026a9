from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.chat_repository import ChatRepository
from src.adapter.repositories.post_like_repository import PostLikeRepository
from src.adapter.repositories.post_repository import PostRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.posts = PostRepository(self.session)
        self.post_likes = PostLikeRepository(self.session)
        self.chats = ChatRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
