import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from gatepass.depends import get_unit_of_work
from gatepass.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gatepass.domain.entities import Department


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test_gatepass.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        for name in TestDataLoader.get("departments"):
            session.add(Department(name=name))
        await session.commit()
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from gatepass.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig, init_database=False)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def login_as(client):
    """Registers (once) and logs in a fixture account, returning auth headers"""
    registered = set()

    async def _login(key: str) -> dict:
        account = TestDataLoader.get_copy("accounts")[key]
        if key not in registered:
            response = await client.post("/api/auth/register", json=account)
            assert response.status_code == 201, response.text
            registered.add(key)

        response = await client.post(
            "/api/auth/login",
            json={"email": account["email"], "password": account["password"]},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
