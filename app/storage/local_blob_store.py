"""
Local Blob Store
Writes named files under an assets root and maps them to public URLs.
"""
import logging
import shutil
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """
    Filesystem-backed blob store

    Files are created with exclusive-create semantics: writing a name that
    already exists fails instead of overwriting it.
    """

    def __init__(self, root: str, base_url: str):
        """
        Args:
            root: Directory files are written under
            base_url: Public URL prefix the root is served from
        """
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def ensure_root(self) -> None:
        """Create the assets root if it does not exist"""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        return self.root / name

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    def write(self, name: str, source: BinaryIO) -> int:
        """
        Stream-copy source into a new file

        Args:
            name: File name under the root
            source: Readable binary stream

        Returns:
            int: Number of bytes written

        Raises:
            FileExistsError: If the name is already taken
            OSError: On any other I/O failure
        """
        path = self.path_for(name)
        with open(path, "xb") as dest:
            shutil.copyfileobj(source, dest)
            size = dest.tell()

        logger.debug(f"Stored {size} bytes at {path}")
        return size
