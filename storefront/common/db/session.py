from contextlib import contextmanager
import os
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/storefront.db")

engine = None
SessionLocal = None


def _build_engine(url: str):
    if url.startswith("sqlite"):
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            # an in-memory database exists only on its own connection
            return create_engine(
                url,
                future=True,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        # Ensure sqlite file parent directory exists to avoid 'unable to open database file'
        db_path = url.split(":///")[-1]
        Path(db_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, future=True)


def configure_engine(url: str = DATABASE_URL):
    """(Re)bind the module-level engine and session factory to ``url``."""
    global engine, SessionLocal
    if engine is not None:
        engine.dispose()
    engine = _build_engine(url)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
    return engine


def init_db() -> None:
    from ..models import Base

    if engine is None:
        configure_engine()
    Base.metadata.create_all(engine)


@contextmanager
def translate_errors(operation: str):
    """Re-raise store failures inside the block as ``PersistenceError``."""
    from ..errors import PersistenceError
    from ..services.logging import log_event

    try:
        yield
    except SQLAlchemyError as exc:
        log_event("error", "db.error", operation=operation, error=exc.__class__.__name__, detail=str(exc))
        raise PersistenceError(f"{operation} failed: {exc.__class__.__name__}") from exc


@contextmanager
def get_session():
    if SessionLocal is None:
        configure_engine()
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
