"""
Database configuration and session management
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from .config import settings
from .models.base import Base
# Import all models to ensure they're registered with SQLAlchemy
from .models import user, post, chat, rating, favorite, report, block  # noqa: F401

# SQLite is used for local runs and tests; a single in-memory database has
# to be shared by every connection, and foreign keys are off unless asked for
if settings.database_url.startswith("sqlite"):
    engine = create_engine(
        settings.database_url,
        echo=(settings.log_verbosity == "full"),
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(
        settings.database_url,
        echo=(settings.log_verbosity == "full"),
        pool_pre_ping=True,
        pool_recycle=300,
    )

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Database dependency for FastAPI routes
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
