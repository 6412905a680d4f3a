"""Seed the roster file with sample residents.

Usage:
    python -m roster.seed [--path PATH] [--force]

Safety:
    - An existing roster file is left untouched unless --force is given
"""

import argparse
from pathlib import Path

from loguru import logger

from roster.core.logger import configure_from_settings
from roster.sample_data import get_sample_persons
from roster.storage.json_storage import JsonRosterStorage


def main(argv: list[str] | None = None) -> int:
    """Main entry point for seeding. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Write sample residents to the roster file")
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Roster JSON file (default: ROSTER_DATA_FILE setting)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing roster file",
    )
    args = parser.parse_args(argv)

    configure_from_settings()
    storage = JsonRosterStorage(args.path)

    if storage.path.exists() and not args.force:
        logger.warning(f"Roster file already exists, not overwriting: {storage.path} (use --force)")
        return 1

    persons = get_sample_persons()
    storage.save_persons(persons)
    logger.info(f"Seeded {len(persons)} residents into {storage.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
