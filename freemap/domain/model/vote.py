"""Vote record owned by the vote tracker."""

from pydantic import BaseModel, Field

from freemap.domain.value import CommentId, PlaceId, VoteKind


class VoteRecord(BaseModel):
    """This user's votes for the current session.

    - place_votes: at most one vote kind per place; absence means no vote
    - comment_likes: comments the user has liked (session-local, not persisted)
    """

    place_votes: dict[PlaceId, VoteKind] = Field(default_factory=dict)
    comment_likes: set[CommentId] = Field(default_factory=set)
