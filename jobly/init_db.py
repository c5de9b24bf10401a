"""
Create the database schema from the SQLAlchemy models.
Run this from the project root:
    python -m jobly.init_db
"""

import logging

from jobly.core.config import settings
from jobly.core.database import engine, init_db
from jobly.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
    logger.info(f"Creating tables for {settings.PROJECT_NAME}...")
    init_db(engine)
    logger.info("Database initialized successfully")


if __name__ == "__main__":
    main()
