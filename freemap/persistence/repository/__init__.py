"""Repository implementations."""

from .inmemory import (
    InMemoryPlaceRepository,
    InMemoryTopicRepository,
    InMemoryVoteStateRepository,
)
from .vote_state import FileVoteStateRepository

__all__ = [
    "FileVoteStateRepository",
    "InMemoryPlaceRepository",
    "InMemoryTopicRepository",
    "InMemoryVoteStateRepository",
]
