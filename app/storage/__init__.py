"""Asset storage backends"""
from app.storage.local_blob_store import LocalBlobStore

__all__ = ["LocalBlobStore"]
