# ticketgate/core/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

engine: Engine | None = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)
Base = declarative_base()


def init_engine(database_url: str, ssl: bool = False) -> Engine:
    """Create the process-wide engine and bind the session factory to it."""
    global engine
    if engine is not None:
        logger.warning("Database engine already initialized, reusing it")
        return engine

    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    elif ssl:
        connect_args = {"sslmode": "require"}
    else:
        connect_args = {}

    engine = create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)
    SessionLocal.configure(bind=engine)
    logger.info("Database engine initialized (%s)", engine.url.render_as_string(hide_password=True))
    return engine


def dispose_engine() -> None:
    global engine
    if engine is None:
        return
    engine.dispose()
    engine = None
    logger.info("Database engine disposed")


# Common DB dependency
def get_db():
    if engine is None:
        raise RuntimeError("Database not initialized, call init_engine() first")
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
