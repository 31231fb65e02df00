"""Comment entity."""

from pydantic import Field

from freemap.domain.model.common import DomainModel
from freemap.domain.value import CommentId


class Comment(DomainModel):
    """Comment attached to a place.

    Comments are stored in insertion order on their place. Display order
    (most liked first) is computed by the ranking engine.
    """

    id: CommentId
    text: str = Field(min_length=1)
    likes: int = Field(default=0, ge=0)
