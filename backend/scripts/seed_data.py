#!/usr/bin/env python3
"""
Create the database tables and load the sample storefront data

Loads 8 products and the orders ORD-2026-0042 / ORD-2026-0043, each with a
delivery order and an invoice. Existing data is left untouched.

Usage:
    python3 seed_data.py [--create-only] [--verbose]

Author: TM3
Date: 2026-01-29
"""
import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dotenv import load_dotenv
load_dotenv()

from unidbox.core.config import settings
from unidbox.core.database import SessionLocal, init_db
from unidbox.seed import seed_database

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Create tables and load the sample storefront catalog and orders'
    )
    parser.add_argument(
        '--create-only',
        action='store_true',
        help='Create tables without loading sample data'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    logger.info(f"Target database: {settings.DATABASE_URL.split('@')[-1]}")
    init_db()

    if args.create_only:
        logger.info("Tables created, skipping sample data")
        return

    db = SessionLocal()
    try:
        seed_database(db)
    except Exception:
        db.rollback()
        logger.error("Seeding failed", exc_info=True)
        raise
    finally:
        db.close()

    logger.info("Seed complete")


if __name__ == "__main__":
    main()
