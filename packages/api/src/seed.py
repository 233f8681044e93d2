# This project was developed with assistance from AI tools.
"""CLI entrypoint for sample data seeding.

Usage:
    python -m src.seed          # Seed sample data
    python -m src.seed --force  # Clear and re-seed
"""

import argparse
import asyncio
import json
import sys

from db.database import SessionLocal

from .services.seed.seeder import seed_sample_data


async def main(force: bool = False) -> None:
    """Run sample data seeding."""
    if SessionLocal is None:
        print("DATABASE_URL is not configured; nothing to seed.", file=sys.stderr)
        sys.exit(1)

    async with SessionLocal() as session:
        result = await seed_sample_data(session, force=force)
        print(json.dumps(result, indent=2, default=str))

        if result.get("status") == "already_seeded":
            print("\nSample data already seeded. Use --force to re-seed.")
            sys.exit(0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed BrokerGPT sample data")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Clear existing sample data and re-seed",
    )
    args = parser.parse_args()
    asyncio.run(main(force=args.force))
