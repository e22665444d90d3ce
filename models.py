"""Shared typed models for the paper catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

DEFAULT_TITLE = "Untitled"
DEFAULT_YEAR = 2025

_INTEGER_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True, slots=True)
class Paper:
    """Research paper metadata record as shown in the catalog."""

    paper_id: str
    title: str
    authors: tuple[str, ...]
    abstract: str
    year: int


def normalize_title(raw: str) -> str:
    """Return the title, or the placeholder when it is empty."""
    return raw if raw else DEFAULT_TITLE


def parse_authors(raw: str) -> tuple[str, ...]:
    """Split a comma separated author string, dropping blank segments.

    Order is preserved and duplicates are kept.
    """
    return tuple(segment.strip() for segment in raw.split(",") if segment.strip())


def parse_year(raw: Any) -> int:
    """Parse a year from form input, falling back to DEFAULT_YEAR."""
    if isinstance(raw, bool):
        return DEFAULT_YEAR
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER_RE.fullmatch(raw.strip()):
        return int(raw.strip())
    return DEFAULT_YEAR
