"""Cast comment vote use case."""

from pydantic import BaseModel

from freemap.application.usecase.base import BaseUseCase
from freemap.domain.service import EntityStore, VoteTracker
from freemap.domain.value import CommentId, PlaceId


class CastCommentVoteRequest(BaseModel):
    """Cast comment vote request."""

    place_id: int
    comment_id: int


class CastCommentVoteResponse(BaseModel):
    """Cast comment vote response."""

    applied: bool
    liked: bool
    likes: int = 0


class CastCommentVoteUseCase(BaseUseCase):
    """Use case for toggling a like on a comment."""

    def __init__(self, vote_tracker: VoteTracker, entity_store: EntityStore) -> None:
        self.vote_tracker = vote_tracker
        self.entity_store = entity_store

    def execute(self, request: CastCommentVoteRequest) -> CastCommentVoteResponse:
        """Execute cast comment vote flow."""
        place_id = PlaceId(request.place_id)
        comment_id = CommentId(request.comment_id)

        applied = self.vote_tracker.cast_comment_vote(place_id, comment_id)

        place = self.entity_store.get_place(place_id)
        comment = place.find_comment(comment_id) if place else None

        return CastCommentVoteResponse(
            applied=applied,
            liked=self.vote_tracker.has_liked_comment(comment_id),
            likes=comment.likes if comment else 0,
        )
