"""
Database initialization script.

Creates the SQLite/Postgres tables directly, without Alembic.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from sprintlab.db.init_db import init_db

if __name__ == "__main__":
    try:
        init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        sys.exit(1)
    logger.success("Database initialized")
