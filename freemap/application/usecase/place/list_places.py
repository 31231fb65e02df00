"""List places use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from freemap.application.location import LocationSession
from freemap.config import RankingSettings
from freemap.domain.error import LocationRequiredError
from freemap.domain.model.place import Place
from freemap.domain.service import (
    EntityStore,
    RankingEngine,
    VoteTracker,
    haversine_distance,
)
from freemap.domain.value import Coordinate, MapView, RankingMode, TopicId, VoteKind


class PlaceItem(BaseModel):
    """Place item in response."""

    place_id: int
    topic_id: int
    name: str
    description: str
    address: str
    image_ref: Optional[str]
    latitude: float
    longitude: float
    likes: int
    dislikes: int
    flags: int
    comment_count: int
    my_vote: Optional[VoteKind]
    distance_m: Optional[float] = None


def to_place_item(
    place: Place, my_vote: Optional[VoteKind], reference: Optional[Coordinate]
) -> PlaceItem:
    """Build the response item for a place."""
    return PlaceItem(
        place_id=place.id,
        topic_id=place.topic_id,
        name=place.name,
        description=place.description,
        address=place.address,
        image_ref=place.image_ref,
        latitude=place.coordinate.latitude,
        longitude=place.coordinate.longitude,
        likes=place.likes,
        dislikes=place.dislikes,
        flags=place.flags,
        comment_count=len(place.comments),
        my_vote=my_vote,
        distance_m=(
            haversine_distance(reference, place.coordinate) if reference else None
        ),
    )


class ListPlacesRequest(BaseModel):
    """List places request."""

    topic_id: int
    mode: Optional[RankingMode] = None  # Defaults to the configured mode


class ListPlacesResponse(BaseModel):
    """List places response."""

    topic_id: int
    mode: RankingMode
    places: list[PlaceItem]
    # Distance ranking was requested but the user's location is unknown;
    # places are then listed in submission order
    requires_location: bool
    view: MapView


class ListPlacesUseCase:
    """Use case for listing the places of a topic in ranked order."""

    def __init__(
        self,
        entity_store: EntityStore,
        ranking_engine: RankingEngine,
        vote_tracker: VoteTracker,
        location_session: LocationSession,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize list places use case.

        Args:
            entity_store: Entity store domain service
            ranking_engine: Ranking engine domain service
            vote_tracker: Vote tracker for the user's vote flags
            location_session: Cached user location
            ranking_settings: Default ranking mode
        """
        self.entity_store = entity_store
        self.ranking_engine = ranking_engine
        self.vote_tracker = vote_tracker
        self.location_session = location_session
        self.ranking_settings = ranking_settings

    def execute(self, request: ListPlacesRequest) -> ListPlacesResponse:
        """Execute list places flow.

        Args:
            request: List places request

        Returns:
            Ranked places with the user's votes and the map view
        """
        mode = request.mode or self.ranking_settings.default_mode

        with logfire.span(
            "list_places.execute", topic_id=request.topic_id, mode=mode.value
        ):
            places = self.entity_store.snapshot().places_for_topic(
                TopicId(request.topic_id)
            )
            reference = self.location_session.current()

            requires_location = False
            try:
                ranked = self.ranking_engine.rank(places, mode, reference)
            except LocationRequiredError:
                logfire.info("Advising user to share location", topic_id=request.topic_id)
                requires_location = True
                ranked = places

            items = [
                to_place_item(place, self.vote_tracker.vote_for(place.id), reference)
                for place in ranked
            ]

            return ListPlacesResponse(
                topic_id=request.topic_id,
                mode=mode,
                places=items,
                requires_location=requires_location,
                view=self.location_session.view(),
            )
