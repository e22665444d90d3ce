"""Observable catalog state shared by every view of the app."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from typing import Any, Awaitable, Callable

from filters import filter_papers
from models import Paper, normalize_title, parse_authors, parse_year
from paper_store import PaperStore

DEFAULT_REFRESH_DELAY_MS = 600

LOGGER = logging.getLogger(__name__)

CatalogListener = Callable[["CatalogService"], None]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class CatalogService:
    """Mediates reads and writes between a consumer and the PaperStore.

    Holds the last-fetched snapshot of the store and a loading flag, and
    notifies subscribed listeners whenever either changes. The refresh delay
    stands in for a network round trip.

    Must be created inside a running event loop: construction starts the
    initial refresh, so a new service is always loading.

    Args:
        store:    The PaperStore to read from and write to.
        delay_ms: Simulated refresh latency. Reads CATALOG_REFRESH_DELAY_MS
            if not supplied; defaults to 600.
        sleep:    Awaitable delay taking seconds (asyncio.sleep by default).
        clock_ms: Returns the current epoch time in milliseconds, used for ids.
    """

    def __init__(
        self,
        store: PaperStore,
        *,
        delay_ms: int | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock_ms: Callable[[], int] = _now_ms,
    ) -> None:
        if delay_ms is None:
            delay_ms = int(os.getenv("CATALOG_REFRESH_DELAY_MS", str(DEFAULT_REFRESH_DELAY_MS)))
        if delay_ms < 0:
            raise ValueError(f"Refresh delay must be non-negative, got {delay_ms}")

        self._store = store
        self._delay_ms = delay_ms
        self._sleep = sleep
        self._clock_ms = clock_ms

        self._snapshot: tuple[Paper, ...] = ()
        self._is_loading = False
        self._in_flight = 0
        self._listeners: list[CatalogListener] = []
        self._tasks: set[asyncio.Task[None]] = set()

        self.initial_refresh = self.refresh()

    @property
    def papers(self) -> tuple[Paper, ...]:
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register listener and return a callable that unregisters it."""
        self._listeners.append(listener)
        LOGGER.debug("Listener subscribed: %r (total=%s)", listener, len(self._listeners))
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CatalogListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
            LOGGER.debug("Listener unsubscribed: %r (total=%s)", listener, len(self._listeners))

    def refresh(self) -> asyncio.Task[None]:
        """Start a refresh and return the task that settles it.

        Loading is set and listeners notified before this returns. The task
        waits out the delay, copies the store listing into the snapshot,
        then notifies again. Overlapping refreshes are not merged; loading
        stays set until the last one settles.
        """
        loop = asyncio.get_running_loop()

        self._in_flight += 1
        self._is_loading = True
        LOGGER.debug("Refresh started (in_flight=%s, delay_ms=%s)", self._in_flight, self._delay_ms)
        self._notify()

        task = loop.create_task(self._settle())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _settle(self) -> None:
        try:
            await self._sleep(self._delay_ms / 1000)
            self._snapshot = tuple(self._store.list_papers())
            LOGGER.info("Refresh complete: papers=%s", len(self._snapshot))
        finally:
            self._in_flight -= 1
            self._is_loading = self._in_flight > 0
            self._notify()

    def get_paper(self, paper_id: str) -> Paper | None:
        return self._store.find_by_id(paper_id)

    def submit_paper(
        self,
        title: str,
        authors_raw: str,
        abstract: str,
        year: Any,
    ) -> asyncio.Task[None]:
        """Normalize form input, add the paper to the store and refresh.

        Malformed input is never rejected: an empty title becomes "Untitled",
        blank author segments are dropped and an unparsable year becomes 2025.
        Returns the refresh task.
        """
        paper = Paper(
            paper_id=self._new_paper_id(),
            title=normalize_title(title),
            authors=parse_authors(authors_raw),
            abstract=abstract,
            year=parse_year(year),
        )
        self._store.add(paper)
        LOGGER.info("Submitted paper_id=%s title=%s", paper.paper_id, paper.title)
        return self.refresh()

    def search(self, query: str) -> list[Paper]:
        """Return snapshot papers matching every term of query."""
        return filter_papers(self._snapshot, query)

    def _new_paper_id(self) -> str:
        # Same-millisecond submissions get a numeric suffix.
        base = f"p{self._clock_ms()}"
        candidate = base
        suffix = 0
        while self._store.find_by_id(candidate) is not None:
            suffix += 1
            candidate = f"{base}-{suffix}"
        return candidate

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                LOGGER.exception("Catalog listener %r failed", listener)
