"""Domain value objects for freemap."""

from freemap.domain.value.identifiers import CommentId, PlaceId, TopicId
from freemap.domain.value.types import Coordinate, MapView, RankingMode, VoteKind

__all__ = [
    # Identifiers
    "TopicId",
    "PlaceId",
    "CommentId",
    # Types
    "Coordinate",
    "MapView",
    "RankingMode",
    "VoteKind",
]
