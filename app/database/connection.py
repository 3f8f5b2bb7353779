# app/database/connection.py
import logging
from typing import Annotated, AsyncIterator, Optional

from fastapi import Request
from pydantic import Field
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from config.appconfig import AppSettings

logger = logging.getLogger(__name__)

Base = declarative_base()

# Primary keys are 32-bit INTEGER columns
MAX_INTEGER_ID = 2**31 - 1
ROW_ID = Annotated[int, Field(ge=1, le=MAX_INTEGER_ID)]


class Database:
    """
    Owns the async engine (connection pool) and session factory.

    Built once per process, opened in the application lifespan and
    disposed at shutdown. Routes reach it through ``get_db``.
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: float = 30.0,
        command_timeout: float = 30.0,
    ):
        self.url = url
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.command_timeout = command_timeout
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            command_timeout=settings.DB_COMMAND_TIMEOUT,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def _connect_args(self) -> dict:
        if self.url.startswith("postgresql+asyncpg"):
            return {"command_timeout": self.command_timeout}
        if self.is_sqlite:
            return {"timeout": self.command_timeout}
        return {}

    def connect(self) -> None:
        if self._engine is not None:
            return

        engine_kwargs = {"echo": self.echo, "connect_args": self._connect_args()}
        if not self.is_sqlite:
            engine_kwargs.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_timeout=self.pool_timeout,
                pool_pre_ping=True,
            )

        self._engine = create_async_engine(self.url, **engine_kwargs)

        if self.is_sqlite:
            # SQLite only enforces foreign keys when asked to, per connection
            @event.listens_for(self._engine.sync_engine, "connect")
            def _enable_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        self._sessionmaker = async_sessionmaker(self._engine, expire_on_commit=False)
        logger.info(f"Database engine created for {self._engine.url.render_as_string(hide_password=True)}")

    async def create_all(self) -> None:
        # Register every table on Base.metadata before creating them
        import app.system_models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1

    def session(self) -> AsyncSession:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not connected")
        return self._sessionmaker()

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._sessionmaker = None


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield one session per request from the application's Database."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
