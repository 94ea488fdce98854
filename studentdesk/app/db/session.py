"""Engine, session factory and transaction helpers."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from studentdesk.app.core.exceptions import RecordError, StorageFailure
from studentdesk.app.core.logging import get_logger
from studentdesk.app.core.settings import get_settings

logger = get_logger("db")
settings = get_settings()

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = create_engine(settings.database_url, connect_args=connect_args)

if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE CASCADE unless enabled per connection.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Run a compound write as one transaction.

    Commits when the block completes, rolls back on any error. Record errors
    propagate unchanged; anything else surfaces as StorageFailure.
    """
    try:
        yield db
        db.commit()
    except RecordError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Transaction rolled back after storage error")
        raise StorageFailure("Storage operation failed", details={"cause": str(exc)}) from exc
    except Exception as exc:
        db.rollback()
        logger.exception("Transaction rolled back after unexpected error")
        raise StorageFailure("Storage operation failed", details={"cause": str(exc)}) from exc


def init_db() -> None:
    from studentdesk.app.db.base import Base

    Base.metadata.create_all(bind=engine)
