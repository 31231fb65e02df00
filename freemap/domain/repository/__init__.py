"""Repository interfaces for the freemap domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from freemap.domain.repository.place import PlaceRepository
from freemap.domain.repository.topic import TopicRepository
from freemap.domain.repository.vote_state import VoteStateRepository

__all__ = [
    "TopicRepository",
    "PlaceRepository",
    "VoteStateRepository",
]
