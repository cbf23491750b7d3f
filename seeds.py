"""
Seed the catalog database from the exoplanet CSV.

Connection settings come from the environment (DATABASE_URL or
DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_NAME); the CSV path from
SEED_CSV_PATH. Exits with status 1 if the store or the source file is
unavailable.
"""
import logging
import sys

import pandas as pd
from sqlalchemy.exc import SQLAlchemyError

from exofinder.database import create_tables, session_scope
from exofinder.services import CatalogLoader, StoreUnavailableError
from exofinder.settings import settings, configure_logging

logger = logging.getLogger("exofinder.seeds")


def seed_database(csv_path: str = None) -> int:
    csv_path = csv_path or settings.seed_csv_path

    try:
        create_tables()
        logger.info("✅ Connected to the catalog store. Starting ETL pipeline...")
        with session_scope() as db:
            CatalogLoader(db).load_csv(csv_path)
    except FileNotFoundError:
        logger.error("❌ Source file not found: %s", csv_path)
        return 1
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        logger.error("❌ Could not read %s: %s", csv_path, exc)
        return 1
    except (StoreUnavailableError, SQLAlchemyError) as exc:
        logger.error("❌ Catalog load aborted: %s", exc)
        return 1

    return 0


def main() -> None:
    configure_logging(settings.log_level)
    sys.exit(seed_database())


if __name__ == "__main__":
    main()
