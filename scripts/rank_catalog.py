#!/usr/bin/env python3
"""
Rank Catalog Script

Scores every catalog entry matching an applicant's preferences and prints
the ranked list.

Usage:
    python -m scripts.rank_catalog --profile profile.json
    python -m scripts.rank_catalog --profile profile.json --catalog catalog.json --limit 5
"""

import asyncio
import argparse
import json
import logging
import sys
from pathlib import Path

from admission_engine.config.settings import configure_logging, get_settings
from admission_engine.infrastructure.exceptions import AdmissionEngineError
from admission_engine.infrastructure.sources import catalog_source_from_file
from admission_engine.services import AdmissionService

logger = logging.getLogger(__name__)


async def rank(profile_path: Path, catalog_path: str | None, limit: int | None) -> int:
    settings = get_settings()
    with profile_path.open(encoding="utf-8") as fh:
        profile_data = json.load(fh)

    try:
        source = catalog_source_from_file(catalog_path or settings.catalog_path)
        service = AdmissionService(catalog_source=source, settings=settings)
        ranked = await service.rank_catalog_from_dict(profile_data, limit=limit)
    except AdmissionEngineError as e:
        logger.error(f"Ranking failed: {e.message}")
        print(json.dumps(e.to_dict(), indent=2, default=str))
        return 1

    if not ranked:
        print("No universities match the selected preferences.")
        return 0

    print("\n=== Admission Chances ===")
    for position, item in enumerate(ranked, start=1):
        print(f"{position:>2}. {item.result.score:>3}  {item.result.category.value:<7} {item.entry.name}")
        for recommendation in item.result.recommendations:
            print(f"       - {recommendation}")
    return 0


async def main() -> int:
    parser = argparse.ArgumentParser(description="Rank catalog universities for an applicant")
    parser.add_argument(
        "--profile",
        type=Path,
        required=True,
        help="Path to a JSON student profile"
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Path to a JSON catalog (default: CATALOG_PATH or the bundled sample)"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results to print"
    )
    args = parser.parse_args()

    configure_logging()
    return await rank(args.profile, args.catalog, args.limit)


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
