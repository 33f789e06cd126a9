from typing import Any
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from fastapi import Request

from . import settings

Base = declarative_base()


def build_engine(url: str = settings.DATABASE_URL) -> AsyncEngine:
    return create_async_engine(url, echo=settings.DB_ECHO, pool_pre_ping=True)


class DatabaseGateway:
    """
    Thin wrapper around an AsyncEngine that runs one parameterized statement
    per call. Each call gets its own transaction: committed when the statement
    succeeds, rolled back when it raises.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def query(self, sql: str, params: dict[str, Any] | None = None) -> list[dict]:
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    async def create_tables(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()


def get_db(request: Request) -> DatabaseGateway:
    return request.app.state.db
