import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from classpoints.core.config import Settings
from classpoints.core.exceptions import ServiceError, TransactionFailure

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    engine_kwargs: dict = {"future": True, "pool_pre_ping": True}
    connect_args: dict = {}

    if url.drivername.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        connect_args["timeout"] = settings.db_timeout_seconds
        if not url.database or url.database == ":memory:":
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            engine_kwargs["pool_size"] = settings.db_pool_size
            engine_kwargs["max_overflow"] = 0
            engine_kwargs["pool_timeout"] = settings.db_pool_timeout_seconds
    else:
        connect_args["connect_timeout"] = int(settings.db_timeout_seconds)
        engine_kwargs["pool_size"] = settings.db_pool_size
        engine_kwargs["max_overflow"] = 0
        engine_kwargs["pool_timeout"] = settings.db_pool_timeout_seconds

    engine = create_engine(settings.database_url, connect_args=connect_args, **engine_kwargs)
    if url.drivername.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.info("Database engine ready: %s", url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session, action: str, failure: type[ServiceError] = TransactionFailure) -> Iterator[Session]:
    """Run the block as one transaction: commit on success, roll back on any error.

    Service errors raised inside the block propagate unchanged; database
    errors are re-raised as ``failure``.
    """
    try:
        yield db
        db.commit()
    except ServiceError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("%s failed, transaction rolled back: %s", action, exc)
        raise failure(f"{action} failed: {exc}") from exc
    except BaseException:
        db.rollback()
        raise
