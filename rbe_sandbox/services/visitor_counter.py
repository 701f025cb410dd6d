"""Visit counter storage.

The counter is a single integer behind a small async interface so that
routes and tests never touch the filesystem or database directly. Reads
are best-effort and fall back to 0; writes propagate their errors.

Backends:
- file: ``{"count": n}`` in one JSON file, increments serialized in-process
- memory: a plain integer, for tests and throwaway deployments
- database: one row updated with ``count = count + 1`` in SQL
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from rbe_sandbox.config import get_settings
from rbe_sandbox.database import create_engine, create_session_maker, init_db
from rbe_sandbox.models.visitor import VisitorCounter

logger = logging.getLogger(__name__)


class CounterStore(ABC):
    """Storage for the visit count."""

    @abstractmethod
    async def get(self) -> int:
        """Return the current count, 0 if nothing is stored yet."""

    @abstractmethod
    async def increment(self) -> int:
        """Add one visit and return the new count."""

    async def init(self):
        """Prepare the backing storage. No-op by default."""

    async def close(self):
        """Release any held resources. No-op by default."""


class InMemoryCounterStore(CounterStore):
    """Counter held in process memory."""

    def __init__(self, initial: int = 0):
        self._count = initial
        self._lock = asyncio.Lock()

    async def get(self) -> int:
        return self._count

    async def increment(self) -> int:
        async with self._lock:
            self._count += 1
            return self._count


class JsonFileCounterStore(CounterStore):
    """Counter persisted as ``{"count": n}`` in a JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        # Read-modify-write is only safe within a single process
        self._lock = asyncio.Lock()

    def _read(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning(f"[VISITORS] Could not read {self.path}: {e}")
            return 0

        count = data.get("count") if isinstance(data, dict) else None
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            logger.warning(f"[VISITORS] Ignoring invalid count in {self.path}: {count!r}")
            return 0
        return count

    def _write(self, count: int):
        self.path.write_text(json.dumps({"count": count}, indent=2), encoding="utf-8")

    async def get(self) -> int:
        return self._read()

    async def increment(self) -> int:
        async with self._lock:
            count = self._read() + 1
            self._write(count)
        logger.info(f"[VISITORS] count={count}")
        return count


class DatabaseCounterStore(CounterStore):
    """Counter stored in a single database row, incremented atomically in SQL."""

    COUNTER_ID = 1

    def __init__(self, session_maker: async_sessionmaker[AsyncSession], engine: Optional[AsyncEngine] = None):
        self.session_maker = session_maker
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "DatabaseCounterStore":
        engine = create_engine(database_url, echo=echo)
        return cls(create_session_maker(engine), engine=engine)

    async def init(self):
        if self.engine is not None:
            await init_db(self.engine)

    async def get(self) -> int:
        try:
            async with self.session_maker() as session:
                count = await session.scalar(
                    select(VisitorCounter.count).where(VisitorCounter.id == self.COUNTER_ID)
                )
        except SQLAlchemyError as e:
            logger.warning(f"[VISITORS] Could not read counter row: {e}")
            return 0
        return count or 0

    async def _increment_once(self) -> int:
        async with self.session_maker() as session:
            async with session.begin():
                result = await session.execute(
                    update(VisitorCounter)
                    .where(VisitorCounter.id == self.COUNTER_ID)
                    .values(count=VisitorCounter.count + 1)
                )
                if result.rowcount == 0:
                    session.add(VisitorCounter(id=self.COUNTER_ID, count=1))
                    return 1
                return await session.scalar(
                    select(VisitorCounter.count).where(VisitorCounter.id == self.COUNTER_ID)
                )

    async def increment(self) -> int:
        try:
            count = await self._increment_once()
        except IntegrityError:
            # Another request created the row first
            count = await self._increment_once()
        logger.info(f"[VISITORS] count={count}")
        return count

    async def close(self):
        if self.engine is not None:
            await self.engine.dispose()


def build_counter_store(backend: str, count_file: str = "", database_url: str = "") -> CounterStore:
    """Create a counter store for the named backend."""
    if backend == "file":
        return JsonFileCounterStore(count_file)
    if backend == "memory":
        return InMemoryCounterStore()
    if backend == "database":
        return DatabaseCounterStore.from_url(database_url)
    raise ValueError(f"Unknown counter backend: {backend}")


@lru_cache
def get_counter_store() -> CounterStore:
    """Dependency returning the process-wide counter store."""
    settings = get_settings()
    logger.info(f"[VISITORS] Using {settings.counter_backend} counter backend")
    return build_counter_store(
        settings.counter_backend,
        count_file=settings.visitor_count_file,
        database_url=settings.database_url,
    )
