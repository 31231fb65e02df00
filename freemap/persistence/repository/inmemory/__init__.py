"""In-memory repository implementations."""

from .place import InMemoryPlaceRepository
from .topic import InMemoryTopicRepository
from .vote_state import InMemoryVoteStateRepository

__all__ = [
    "InMemoryPlaceRepository",
    "InMemoryTopicRepository",
    "InMemoryVoteStateRepository",
]
