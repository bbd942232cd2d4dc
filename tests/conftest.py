# tests/conftest.py
import os
import tempfile

# config reads these at import time
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["DB_TYPE"] = "sqlite"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{tempfile.mkdtemp()}/storefront.db"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from storefront.core.db import Base, get_db
from storefront.core.security import hash_password
from storefront.main import app
from storefront.models.catalog_models import Brand, Category
from storefront.models.user_models import ADMIN_ROLE, User, UserRole, Profile
from storefront.routers.cart_router import get_cart_storage_dir
from storefront.services.auth_service import create_tokens

PASSWORD = "secret123"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory, tmp_path):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cart_storage_dir] = lambda: str(tmp_path / "carts")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def create_user(session_factory, email, roles=()):
    async with session_factory() as session:
        user = User(
            email=email,
            password_hash=hash_password(PASSWORD),
            is_active=True,
            token_version=0,
            profile=Profile(full_name="Test User"),
            roles=[UserRole(role=role) for role in roles],
        )
        session.add(user)
        await session.commit()
        return user


def auth_headers(user):
    return {"Authorization": f"Bearer {create_tokens(user)}"}


@pytest.fixture
async def admin_user(session_factory):
    return await create_user(session_factory, "admin@example.com", [ADMIN_ROLE])


@pytest.fixture
async def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
async def customer_headers(session_factory):
    user = await create_user(session_factory, "customer@example.com")
    return auth_headers(user)


@pytest.fixture
async def lookups(session_factory):
    async with session_factory() as session:
        bmw, audi = Brand(name="BMW"), Brand(name="Audi")
        brakes, engine_parts = Category(name="Brakes"), Category(name="Engine")
        session.add_all([bmw, audi, brakes, engine_parts])
        await session.commit()
        return {"BMW": bmw.id, "Audi": audi.id, "Brakes": brakes.id, "Engine": engine_parts.id}
