import re
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Result
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from app.core.config import settings

# Create SQLAlchemy engine
if settings.DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,  # Connection pool size
        max_overflow=20  # Allow up to 20 connections beyond pool_size
    )

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# $1, $2, ... positional placeholders
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> Result:
    """
    Execute SQL written with positional $n placeholders.

    Each $n is rewritten to the named bind parameter :p<n> and bound to
    values[n - 1], so callers can build statements the way the partial-update
    helper does without ever interpolating values into the SQL text.

    Args:
        db: Database session
        sql: Statement text using $1..$n placeholders
        values: Values aligned with the placeholders

    Returns:
        SQLAlchemy Result of the statement
    """
    params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    statement = text(_PLACEHOLDER_RE.sub(lambda m: f":p{m.group(1)}", sql))
    return db.execute(statement, params)


def init_db():
    """
    Initialize database.

    We rely on Alembic for table creation, so this only ensures models are
    imported/registered on Base.metadata.

    Use "alembic upgrade head" to create/update database schema.
    """
    from app.models import company, job, user  # noqa: F401  Import models to register them


def close_db():
    """Release every pooled connection held by the engine."""
    engine.dispose()
