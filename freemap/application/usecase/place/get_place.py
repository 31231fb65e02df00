"""Get place use case."""

from typing import Optional

from pydantic import BaseModel

from freemap.application.location import LocationSession
from freemap.application.usecase.place.list_places import PlaceItem, to_place_item
from freemap.domain.service import EntityStore, RankingEngine, VoteTracker
from freemap.domain.value import PlaceId


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    text: str
    likes: int
    liked_by_me: bool


class GetPlaceRequest(BaseModel):
    """Get place request."""

    place_id: int


class GetPlaceResponse(BaseModel):
    """Get place response.

    place is None when the place does not exist.
    """

    place: Optional[PlaceItem]
    comments: list[CommentItem]


class GetPlaceUseCase:
    """Use case for a place's detail view with its comments."""

    def __init__(
        self,
        entity_store: EntityStore,
        ranking_engine: RankingEngine,
        vote_tracker: VoteTracker,
        location_session: LocationSession,
    ) -> None:
        self.entity_store = entity_store
        self.ranking_engine = ranking_engine
        self.vote_tracker = vote_tracker
        self.location_session = location_session

    def execute(self, request: GetPlaceRequest) -> GetPlaceResponse:
        """Execute get place flow.

        Comments are returned most liked first; ties keep insertion order.
        """
        place = self.entity_store.get_place(PlaceId(request.place_id))
        if place is None:
            return GetPlaceResponse(place=None, comments=[])

        comments = [
            CommentItem(
                comment_id=comment.id,
                text=comment.text,
                likes=comment.likes,
                liked_by_me=self.vote_tracker.has_liked_comment(comment.id),
            )
            for comment in self.ranking_engine.rank_comments(place.comments)
        ]

        return GetPlaceResponse(
            place=to_place_item(
                place,
                self.vote_tracker.vote_for(place.id),
                self.location_session.current(),
            ),
            comments=comments,
        )
