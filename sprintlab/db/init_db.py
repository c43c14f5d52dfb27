"""
Database initialization.

Creates all tables without going through Alembic (local SQLite setups).
"""

from loguru import logger
from sqlmodel import SQLModel

from sprintlab.db import base  # noqa: F401
from sprintlab.db.session import engine


def init_db() -> None:
    """Create every SQLModel table that does not exist yet."""
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
