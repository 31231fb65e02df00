"""Cast vote use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from freemap.application.usecase.base import BaseUseCase
from freemap.domain.service import EntityStore, VoteTracker
from freemap.domain.value import PlaceId, VoteKind


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    place_id: int
    kind: VoteKind


class CastVoteResponse(BaseModel):
    """Cast vote response with the place's counters after the vote."""

    applied: bool
    my_vote: Optional[VoteKind]
    likes: int = 0
    dislikes: int = 0
    flags: int = 0


class CastVoteUseCase(BaseUseCase):
    """Use case for liking, disliking or flagging a place.

    Casting the same kind twice withdraws the vote; casting another kind
    switches to it.
    """

    def __init__(self, vote_tracker: VoteTracker, entity_store: EntityStore) -> None:
        """Initialize cast vote use case.

        Args:
            vote_tracker: Vote tracker domain service
            entity_store: Entity store for reading the updated counters
        """
        self.vote_tracker = vote_tracker
        self.entity_store = entity_store

    def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow."""
        with logfire.span(
            "cast_vote.execute", place_id=request.place_id, kind=request.kind.value
        ):
            place_id = PlaceId(request.place_id)
            applied = self.vote_tracker.cast_vote(place_id, request.kind)

            place = self.entity_store.get_place(place_id)
            if place is None:
                return CastVoteResponse(applied=applied, my_vote=None)

            return CastVoteResponse(
                applied=applied,
                my_vote=self.vote_tracker.vote_for(place_id),
                likes=place.likes,
                dislikes=place.dislikes,
                flags=place.flags,
            )
