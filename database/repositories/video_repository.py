"""
Video Repository
CRUD operations for the videos table.
"""
import sqlite3
from typing import Optional, List
from uuid import UUID

from app.spec.models import Video
from database import DatabaseConnection


class StoreError(Exception):
    """Raised when the datastore cannot complete an operation"""


class VideoNotFoundError(StoreError):
    """Raised when no video exists for the requested id"""

    def __init__(self, video_id: UUID):
        super().__init__(f"Video not found: {video_id}")
        self.video_id = video_id


class VideoRepository:
    """Repository for video metadata operations"""

    def __init__(self, db: DatabaseConnection):
        """
        Initialize repository with a connection manager

        Args:
            db: Database connection manager
        """
        self.db = db

    def create(self, video: Video) -> Video:
        """
        Insert a new video record

        Args:
            video: Video to insert

        Returns:
            Video: The inserted video

        Raises:
            StoreError: If the insert fails (e.g. duplicate id)
        """
        conn = self.db.connection
        try:
            conn.execute(
                """
                INSERT INTO videos (
                    id, user_id, title, description,
                    thumbnail_url, video_url, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    str(video.id),
                    str(video.userId),
                    video.title,
                    video.description,
                    video.thumbnailUrl,
                    video.videoUrl,
                    video.createdAt,
                    video.updatedAt,
                ),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Failed to create video {video.id}: {e}") from e

        return video

    def get(self, video_id: UUID) -> Video:
        """
        Get video by id

        Args:
            video_id: Video identifier

        Returns:
            Video: The stored video

        Raises:
            VideoNotFoundError: If no video has this id
            StoreError: If the query fails
        """
        row = self._fetch_one(
            """
            SELECT id, user_id, title, description, thumbnail_url,
                   video_url, created_at, updated_at
            FROM videos
            WHERE id = ?
        """,
            (str(video_id),),
        )

        if row is None:
            raise VideoNotFoundError(video_id)
        return self._row_to_video(row)

    def update(self, video: Video) -> None:
        """
        Write every mutable field of the video back in place

        There is no version check: concurrent updates are last-writer-wins.

        Args:
            video: Video with updated fields

        Raises:
            VideoNotFoundError: If the video no longer exists
            StoreError: If the update fails
        """
        conn = self.db.connection
        try:
            cursor = conn.execute(
                """
                UPDATE videos
                SET title = ?, description = ?, thumbnail_url = ?,
                    video_url = ?, updated_at = ?
                WHERE id = ?
            """,
                (
                    video.title,
                    video.description,
                    video.thumbnailUrl,
                    video.videoUrl,
                    video.updatedAt,
                    str(video.id),
                ),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Failed to update video {video.id}: {e}") from e

        if cursor.rowcount == 0:
            raise VideoNotFoundError(video.id)

    def delete(self, video_id: UUID) -> bool:
        """
        Delete video record

        Args:
            video_id: Video identifier

        Returns:
            bool: True if deleted, False if not found
        """
        conn = self.db.connection
        try:
            cursor = conn.execute("DELETE FROM videos WHERE id = ?", (str(video_id),))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Failed to delete video {video_id}: {e}") from e

        return cursor.rowcount > 0

    def list_by_user(self, user_id: UUID, limit: int = 100, offset: int = 0) -> List[Video]:
        """
        List videos owned by a user, newest first

        Args:
            user_id: Owner identifier
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List[Video]: Videos owned by the user
        """
        try:
            cursor = self.db.connection.execute(
                """
                SELECT id, user_id, title, description, thumbnail_url,
                       video_url, created_at, updated_at
                FROM videos
                WHERE user_id = ?
                ORDER BY created_at DESC
                LIMIT ? OFFSET ?
            """,
                (str(user_id), limit, offset),
            )
            rows = cursor.fetchall()
            cursor.close()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to list videos for {user_id}: {e}") from e

        return [self._row_to_video(row) for row in rows]

    def _fetch_one(self, query: str, params: tuple) -> Optional[sqlite3.Row]:
        try:
            cursor = self.db.connection.execute(query, params)
            row = cursor.fetchone()
            cursor.close()
        except sqlite3.Error as e:
            raise StoreError(f"Query failed: {e}") from e
        return row

    def _row_to_video(self, row: sqlite3.Row) -> Video:
        """
        Convert SQLite row to a Video model

        Args:
            row: SQLite row object

        Returns:
            Video: Parsed video
        """
        return Video(
            id=row["id"],
            userId=row["user_id"],
            title=row["title"],
            description=row["description"],
            thumbnailUrl=row["thumbnail_url"],
            videoUrl=row["video_url"],
            createdAt=row["created_at"],
            updatedAt=row["updated_at"],
        )
