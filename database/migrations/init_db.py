"""
Initial database schema migration
"""
import sqlite3


def create_tables(conn: sqlite3.Connection):
    """
    Create initial database tables

    Args:
        conn: SQLite database connection
    """
    cursor = conn.cursor()

    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS videos (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            title TEXT NOT NULL,
            description TEXT,
            thumbnail_url TEXT,
            video_url TEXT,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """
    )

    cursor.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_videos_user_id
        ON videos(user_id)
    """
    )

    conn.commit()
    cursor.close()
