"""Keyword matching for catalog search (no ranking)."""

from __future__ import annotations

from models import Paper


def query_terms(query: str) -> list[str]:
    """Split a free-text query into lowercase terms."""
    return query.lower().split()


def matches_query(paper: Paper, query: str) -> bool:
    """Return True if every query term occurs in the paper's searchable text.

    Searchable text is the title, the authors and the abstract. A blank
    query matches everything.
    """
    terms = query_terms(query)
    if not terms:
        return True

    text = f"{paper.title} {' '.join(paper.authors)} {paper.abstract or ''}".lower()
    return all(term in text for term in terms)


def filter_papers(papers: list[Paper] | tuple[Paper, ...], query: str) -> list[Paper]:
    """Keep the papers matching query, preserving their order."""
    return [paper for paper in papers if matches_query(paper, query)]
