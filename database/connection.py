"""
Database connection management
Owns the SQLite connection used by the repositories.
"""
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from config.settings import load_database_config

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """SQLite database connection manager"""

    def __init__(self, database_path: str, db_config: Optional[dict] = None):
        self.database_path = database_path
        self.db_config = db_config if db_config is not None else load_database_config()
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        """
        Get or create database connection

        Returns:
            sqlite3.Connection: Database connection
        """
        if self._connection is None:
            self._connection = self._create_connection()
        return self._connection

    def _create_connection(self) -> sqlite3.Connection:
        """
        Create new SQLite connection with proper settings

        Returns:
            sqlite3.Connection: New database connection
        """
        Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)

        db_settings = self.db_config.get("database", {})

        conn = sqlite3.connect(
            self.database_path,
            check_same_thread=db_settings.get("check_same_thread", False),
            timeout=db_settings.get("timeout", 30),
        )

        # Enable row factory for dict-like access
        conn.row_factory = sqlite3.Row

        if db_settings.get("foreign_keys", True):
            conn.execute("PRAGMA foreign_keys = ON")

        journal_mode = db_settings.get("journal_mode", "WAL")
        conn.execute(f"PRAGMA journal_mode = {journal_mode}")

        return conn

    def close(self):
        """Close database connection"""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Database connection closed")


def init_db(db: DatabaseConnection):
    """
    Run migrations against the given connection

    This should be called when the application starts.
    """
    from database.migrations.init_db import create_tables

    logger.info(f"Initializing database at: {db.database_path}")
    create_tables(db.connection)
