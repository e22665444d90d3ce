"""Console entrypoint for browsing and submitting catalog papers."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from dotenv import load_dotenv

from catalog_service import CatalogService
from paper_store import PaperStore
from views import (
    render_explore,
    render_home,
    render_paper_detail,
    render_profile,
    render_upload_result,
)

VIEWS = ["home", "explore", "upload", "profile", "paper"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Browse and submit research papers in the in-memory catalog")
    parser.add_argument("--view", choices=VIEWS, default="home", help="Screen to render (default: home)")
    parser.add_argument("--query", default="", help="Search terms for the explore view")
    parser.add_argument("--paper-id", default="", help="Paper to show in the paper view")
    parser.add_argument("--title", default="", help="Title for the upload view")
    parser.add_argument("--authors", default="", help="Comma separated authors for the upload view")
    parser.add_argument("--abstract", default="", help="Abstract for the upload view")
    parser.add_argument("--year", default="", help="Publication year for the upload view")
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Simulated refresh latency; overrides CATALOG_REFRESH_DELAY_MS",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> str:
    """Build a fresh catalog, render the requested view and return its text."""
    service = CatalogService(PaperStore(), delay_ms=args.delay_ms)
    await service.initial_refresh

    if args.view == "upload":
        await service.submit_paper(args.title, args.authors, args.abstract, args.year)
        paper = service.papers[0]
        logging.info("Uploaded paper_id=%s", paper.paper_id)
        return "\n\n".join([render_upload_result(), render_paper_detail(paper)])
    if args.view == "explore":
        return render_explore(service, args.query)
    if args.view == "profile":
        return render_profile(service)
    if args.view == "paper":
        paper = service.get_paper(args.paper_id)
        if paper is None:
            logging.warning("No paper with paper_id=%s", args.paper_id)
        return render_paper_detail(paper)
    return render_home(service)


def main(argv: list[str] | None = None) -> None:
    """Initialize config and render one view."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)
    print(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
