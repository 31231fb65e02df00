"""Vote state storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class VoteStateRepository(ABC):
    """Key/value storage for the serialized vote state.

    The vote tracker writes its whole place-vote map as one text blob under
    a fixed key, so implementations only need to load and overwrite blobs.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Load the blob stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored blob, or None if nothing is stored
        """
        pass

    @abstractmethod
    def save(self, key: str, blob: str) -> None:
        """Overwrite the blob stored under a key.

        Write failures are logged, never raised.

        Args:
            key: Storage key
            blob: Serialized state
        """
        pass
