"""Place entity.

Places are user submissions tied to a topic and a map coordinate.
"""

from typing import Optional

from pydantic import Field

from freemap.domain.model.comment import Comment
from freemap.domain.model.common import DomainModel
from freemap.domain.value import CommentId, Coordinate, PlaceId, TopicId


class Place(DomainModel):
    """Place entity.

    Counters are only ever changed through the vote tracker so they stay
    in step with the user's recorded votes.
    """

    id: PlaceId
    topic_id: TopicId
    name: str = Field(min_length=1)
    description: str = ""
    address: str = ""
    image_ref: Optional[str] = None
    coordinate: Coordinate
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    flags: int = Field(default=0, ge=0)
    comments: tuple[Comment, ...] = ()

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment on this place by ID."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None
