"""Domain model entities for freemap."""

from freemap.domain.model.comment import Comment
from freemap.domain.model.place import Place
from freemap.domain.model.topic import Topic
from freemap.domain.model.vote import VoteRecord

__all__ = [
    "Topic",
    "Place",
    "Comment",
    "VoteRecord",
]
