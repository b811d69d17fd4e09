#!/usr/bin/env python3
"""
Inspect or reset the catalog store configured by STORAGE_BACKEND.

Usage:
  python scripts/reset_catalog.py            # print the current catalog
  python scripts/reset_catalog.py --reset    # drop catalog and session, reseed the examples
  python scripts/reset_catalog.py --logout   # remove the stored session only
"""
from __future__ import annotations

import argparse
import logging
import sys

from netflex.core.config import get_settings
from netflex.core.logs import configure_logging
from netflex.domain.catalog import dashboard_stats
from netflex.repositories.base import build_store
from netflex.repositories.content_repository import ContentRepository
from netflex.repositories.session_repository import SessionRepository
from netflex.services.content_service import ContentService

logger = logging.getLogger("reset_catalog")


def main() -> None:
    ap = argparse.ArgumentParser(description="Inspect or reset the Netflex mock store")
    ap.add_argument("--reset", action="store_true", help="Drop catalog and session, then reseed the examples")
    ap.add_argument("--logout", action="store_true", help="Remove the stored session only")
    args = ap.parse_args()

    configure_logging()
    settings = get_settings()
    store = build_store(settings)
    catalog = ContentRepository(store)
    sessions = SessionRepository(store)

    if args.reset:
        catalog.clear()
        sessions.clear()
        ContentService(catalog).initialize()
        logger.info("Catalog reset on %s backend", settings.storage_backend)
    elif args.logout:
        sessions.clear()
        logger.info("Session removed")

    items = catalog.load_all()
    stats = dashboard_stats(items)
    print(f"Backend: {settings.storage_backend}")
    print(f"  Total: {stats['total']}  Series: {stats['series']}  Singles: {stats['singles']}  Popular: {stats['popular']}")
    for item in items:
        print(f"  [{item.id}] {item.title} ({item.year}, {item.genre.value}, {item.country.value})")
    session = sessions.load()
    print(f"  Session: {session.username if session else '-'}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
