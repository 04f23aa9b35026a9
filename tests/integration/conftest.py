import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from tests.fixtures.json_loader import TestDataLoader
from src.adapter.services.in_memory_rate_limiter import InMemoryRateLimiter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import enable_sqlite_foreign_keys, get_unit_of_work


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_limiter(clock):
    return InMemoryRateLimiter(
        window_seconds=ApplicationConfig.RATE_LIMIT_WINDOW_SECONDS,
        max_requests=ApplicationConfig.RATE_LIMIT_MAX_REQUESTS,
        clock=clock,
    )


@pytest_asyncio.fixture
async def client(session_factory, rate_limiter):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig, rate_limiter=rate_limiter)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def signup(client):
    """Sign a user up and return (token, user_id)"""

    async def _signup(username: str, password: str):
        response = await client.post(
            "/api/auth/signup", json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return data["token"], data["user"]["id"]

    return _signup
