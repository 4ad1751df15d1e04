import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db import models  # noqa: F401  регистрация моделей в metadata
from app.db.base import Base

logger = logging.getLogger(__name__)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Асинхронный движок ровно с одним соединением"""
    if database_url.startswith("sqlite"):
        # In-memory база живёт, пока живо единственное соединение
        return create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(database_url, echo=echo, pool_size=1, max_overflow=0)


class Database:
    """Единственная сессия БД с последовательным доступом

    Одновременно выполняется только одна операция, остальные ждут
    в порядке поступления (asyncio.Lock обслуживает ожидающих по FIFO).
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session = AsyncSession(engine, expire_on_commit=False)
        self._lock = asyncio.Lock()

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "Database":
        return cls(create_engine(database_url, echo=echo))

    async def init(self) -> None:
        """Создание схемы"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[AsyncSession]:
        """Эксклюзивный доступ к сессии"""
        async with self._lock:
            yield self._session

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    async def close(self) -> None:
        await self._session.close()
        await self.engine.dispose()
        logger.info("Database connection closed")
