"""File-backed vote state storage."""

import re
from pathlib import Path
from typing import Optional

import logfire

from freemap.domain.repository.vote_state import VoteStateRepository

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class FileVoteStateRepository(VoteStateRepository):
    """Stores each key as a UTF-8 text file inside a directory.

    Writes go to a temporary sibling file first and are then renamed over
    the target, so a crash mid-write leaves the previous blob intact.
    """

    def __init__(self, directory: Path) -> None:
        """Initialize repository.

        Args:
            directory: Directory holding the blobs (created on first write)
        """
        self.directory = directory

    def _path(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def load(self, key: str) -> Optional[str]:
        """Load the blob stored under a key.

        Unreadable files are reported as missing.
        """
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logfire.warn("Failed to read vote state", path=str(path), error=str(e))
            return None

    def save(self, key: str, blob: str) -> None:
        """Overwrite the blob stored under a key.

        A failed write is logged and leaves the previous blob in place.
        """
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(blob, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            logfire.warn("Failed to write vote state", path=str(path), error=str(e))
