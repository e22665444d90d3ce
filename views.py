"""Plain-text renderings of the catalog screens."""

from __future__ import annotations

import os
from typing import Iterable

from catalog_service import CatalogService
from models import Paper

APP_TITLE = "AI InnovateHub"
UPLOAD_SUCCESS_MESSAGE = "Uploaded successfully"
NOT_FOUND_MESSAGE = "Paper not found"

PROFILE_LINES = (
    "HopeMotion Foundation",
    "Kolhapur, Maharashtra",
    "hopeMotionFoundation@gmail.com",
)

_DEFAULT_PREVIEW_MAX_CHARS = 120


def preview_text(value: str, max_len: int | None = None) -> str:
    """Strip value and truncate it to max_len chars for list previews."""
    if max_len is None:
        max_len = int(os.getenv("PREVIEW_MAX_CHARS", str(_DEFAULT_PREVIEW_MAX_CHARS)))
    if max_len < 1:
        raise ValueError(f"Preview length must be at least 1, got {max_len}")
    s = value.strip()
    if len(s) > max_len:
        return s[: max_len - 1] + "…"
    return s


def format_authors(paper: Paper) -> str:
    return ", ".join(paper.authors)


def render_paper_list(papers: Iterable[Paper]) -> str:
    """Render one card per paper: title, authors, abstract preview."""
    cards = [
        "\n".join([paper.title, format_authors(paper), preview_text(paper.abstract)])
        for paper in papers
    ]
    return "\n\n".join(cards) if cards else "No papers yet."


def render_home(service: CatalogService) -> str:
    lines = [f"Welcome to {APP_TITLE}"]
    if service.is_loading:
        lines.append("Loading...")
        return "\n".join(lines)
    lines += ["Recent papers", "", render_paper_list(service.papers)]
    return "\n".join(lines)


def render_explore(service: CatalogService, query: str = "") -> str:
    lines = ["Explore Research"]
    if query.strip():
        lines.append(f"Search: {query.strip()}")
    lines += ["", render_paper_list(service.search(query))]
    return "\n".join(lines)


def render_profile(service: CatalogService) -> str:
    lines = [*PROFILE_LINES, "", "My publications", "", render_paper_list(service.papers)]
    return "\n".join(lines)


def render_paper_detail(paper: Paper | None) -> str:
    """Render the detail screen, or the not-found state for a missing paper."""
    if paper is None:
        return NOT_FOUND_MESSAGE
    return "\n".join([
        paper.title,
        f"Authors: {format_authors(paper)}",
        "",
        "Abstract",
        paper.abstract,
        "",
        f"Year: {paper.year}",
    ])


def render_upload_result() -> str:
    return UPLOAD_SUCCESS_MESSAGE
