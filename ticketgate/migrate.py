# ticketgate/migrate.py
"""Create the ticket schema. Safe to run repeatedly."""
import logging

from sqlalchemy.engine import Engine

from ticketgate.core import database
from ticketgate.core.config import get_settings
from ticketgate.ticket import models  # noqa: F401  registers the tickets table

logger = logging.getLogger(__name__)


def run_migrations(engine: Engine) -> None:
    database.Base.metadata.create_all(bind=engine)
    logger.info('Table "tickets" is ready')


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    engine = database.init_engine(settings.DATABASE_URL, ssl=settings.DATABASE_SSL)
    try:
        run_migrations(engine)
    finally:
        database.dispose_engine()


if __name__ == "__main__":
    main()
