"""In-memory paper store (no persistence)."""

from __future__ import annotations

import logging

from models import Paper

LOGGER = logging.getLogger(__name__)

SEED_PAPERS: tuple[Paper, ...] = (
    Paper(
        paper_id="p1",
        title="Contrastive Learning for Vision",
        authors=("A. Researcher", "B. Student"),
        abstract="We propose a contrastive learning framework...",
        year=2024,
    ),
    Paper(
        paper_id="p2",
        title="Large Language Models for Code",
        authors=("C. Engineer",),
        abstract="Exploring code generation and evaluation...",
        year=2025,
    ),
)


class PaperStore:
    """Authoritative holder of all Paper records, newest first."""

    def __init__(self) -> None:
        self._items: list[Paper] = []
        self._seeded = False
        self.seed()

    def seed(self) -> None:
        """Load the fixed seed records. Only the first call has an effect."""
        if self._seeded:
            return
        self._items.extend(SEED_PAPERS)
        self._seeded = True
        LOGGER.debug("Seeded store with %s papers", len(SEED_PAPERS))

    def list_papers(self) -> list[Paper]:
        return list(self._items)

    def find_by_id(self, paper_id: str) -> Paper | None:
        return next((paper for paper in self._items if paper.paper_id == paper_id), None)

    def add(self, paper: Paper) -> None:
        self._items.insert(0, paper)

    def __len__(self) -> int:
        return len(self._items)
