#!/usr/bin/env python3
"""
Initialize the Pawnder taxonomy database
Creates the schema and optionally seeds the default attribute catalog
"""

import argparse
import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_databases")


def init_schema() -> bool:
    """Create tables and indexes"""
    logger.info("=" * 60)
    logger.info("Initializing database schema...")
    logger.info("=" * 60)

    try:
        from domain.models.database import init_database, engine
        from sqlalchemy import inspect

        init_database()

        tables = inspect(engine).get_table_names()
        logger.info(f"✓ {len(tables)} tables present: {', '.join(tables)}")
        return True
    except Exception as e:
        logger.exception(f"✗ Failed to initialize schema: {e}")
        return False


def seed_catalog() -> bool:
    """Insert the default attributes that are missing"""
    from domain.models import SessionLocal
    from services.catalog_seed import seed_default_catalog

    db = SessionLocal()
    try:
        created = seed_default_catalog(db)
        if created:
            logger.info(f"✓ Seeded {len(created)} attributes: {', '.join(created)}")
        else:
            logger.info("→ Catalog already seeded, nothing to do")
        return True
    except Exception as e:
        logger.exception(f"✗ Seeding failed: {e}")
        return False
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--seed", action="store_true", help="Insert the default attribute catalog"
    )
    args = parser.parse_args(argv)

    if not init_schema():
        return 1
    if args.seed and not seed_catalog():
        return 1

    logger.info("✓ Database ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
