from abc import ABC, abstractmethod

from src.app.repositories.chat_repository import IChatRepository
from src.app.repositories.post_like_repository import IPostLikeRepository
from src.app.repositories.post_repository import IPostRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    posts: IPostRepository
    post_likes: IPostLikeRepository
    chats: IChatRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
