from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog import models
from blog.core.config import get_settings
from blog.core.logging import get_logger

logger = get_logger(__name__)


def build_engine(database_url: str):
    url = make_url(database_url)
    kwargs = {}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        # An in-memory database only lives as long as its connection
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    db_engine = create_engine(database_url, **kwargs)

    if url.get_backend_name() == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    return db_engine


engine = build_engine(get_settings().DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create the users and posts tables if they are missing."""
    models.Base.metadata.create_all(bind=bind or engine)
    logger.info("Database schema ready")
