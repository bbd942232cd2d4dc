from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from storefront.core.config import DATABASE_URL, DB_TYPE
import ssl

Base = declarative_base()

engine_kwargs = {"echo": False, "future": True}

if DB_TYPE == "postgres":
    # SSL setup for Supabase
    ssl_ctx = ssl.create_default_context()
    ssl_ctx.check_hostname = False
    ssl_ctx.verify_mode = ssl.CERT_NONE

    engine_kwargs.update(
        pool_size=5,
        max_overflow=10,
        connect_args={
            # Disable prepared statements (PgBouncer transaction pooling)
            "statement_cache_size": 0,
            "prepared_statement_cache_size": 0,
            "server_settings": {"prepareThreshold": "0"},  # must be string!
            "ssl": ssl_ctx,
        },
    )

engine = create_async_engine(DATABASE_URL, **engine_kwargs)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


# SQLite foreign key enforcement
if DB_TYPE == "sqlite":
    from sqlalchemy import event

    @event.listens_for(engine.sync_engine, "connect")
    def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


import storefront.models  # noqa: E402,F401  registers tables on Base.metadata


async def init_models():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
