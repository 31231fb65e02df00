"""In-memory vote state storage for testing."""

from typing import Optional

from freemap.domain.repository.vote_state import VoteStateRepository


class InMemoryVoteStateRepository(VoteStateRepository):
    """In-memory implementation of VoteStateRepository for testing."""

    def __init__(self, blobs: dict[str, str] | None = None) -> None:
        self._blobs: dict[str, str] = dict(blobs or {})

    def load(self, key: str) -> Optional[str]:
        """Load the blob stored under a key."""
        return self._blobs.get(key)

    def save(self, key: str, blob: str) -> None:
        """Overwrite the blob stored under a key."""
        self._blobs[key] = blob
