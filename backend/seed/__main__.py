"""CLI entry: seed reference data. Usage: python -m seed [--reset] (from backend dir)."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.config import get_settings
from core.database import DatabaseManager
from core.logging import setup_logging
from seed.seed_reference import clear_reference_data, seed_reference_data


async def _main(reset: bool) -> int:
    settings = get_settings()
    setup_logging(settings)
    manager = DatabaseManager(settings.database_url)
    await manager.init()
    try:
        await manager.create_tables()
        async with manager.session() as session:
            if reset:
                await clear_reference_data(session)
            counts = await seed_reference_data(session)
    finally:
        await manager.dispose()
    print("Seed complete:", counts)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sports, teams, matches and users")
    parser.add_argument("--reset", action="store_true", help="Clear reference data before seeding")
    args = parser.parse_args()
    exit_code = asyncio.run(_main(args.reset))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
