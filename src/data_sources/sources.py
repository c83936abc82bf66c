"""Asynchronous data sources for clients and the executor.

A data source never raises for an expected fetch problem: it returns a
``Failure`` whose message is passed through verbatim to the report output.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from src.data_sources.config import DATA_DIR, FETCH_TIMEOUT_SECONDS
from src.data_sources.ingestion import ClientRecordIngester, IngestionError
from src.matching.models import Client, Executor
from src.matching.result import Failure, FallibleResult, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataSource(ABC):
    """Provides the two independently failable fetches a report needs."""

    @abstractmethod
    async def fetch_clients(self) -> FallibleResult[List[Client]]:
        """Fetch every client record."""

    @abstractmethod
    async def fetch_executor(self) -> FallibleResult[Executor]:
        """Fetch the executor record."""


class FileDataSource(DataSource):
    """Data source backed by record files in a directory.

    Blocking file reads run in a worker thread so both fetches can be
    in flight at the same time.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        timeout: float = FETCH_TIMEOUT_SECONDS,
    ):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.timeout = timeout
        self.ingester = ClientRecordIngester(self.data_dir)

    async def fetch_clients(self) -> FallibleResult[List[Client]]:
        return await self._fetch("clients", self.ingester.read_clients)

    async def fetch_executor(self) -> FallibleResult[Executor]:
        return await self._fetch("executor", self.ingester.read_executor)

    async def _fetch(self, what: str, reader: Callable[[], T]) -> FallibleResult[T]:
        """Run *reader* off the event loop and wrap its outcome in a result."""
        logger.info("Fetching %s from %s", what, self.data_dir)
        try:
            value = await asyncio.wait_for(
                asyncio.to_thread(reader), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            message = f"Timed out fetching {what} after {self.timeout}s"
            logger.warning(message)
            return Failure(message)
        except (IngestionError, FileNotFoundError) as e:
            logger.warning("Failed to fetch %s: %s", what, e)
            return Failure(str(e))

        return Success(value)
