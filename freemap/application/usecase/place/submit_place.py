"""Submit place use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, ValidationError

from freemap.domain.service import EntityStore
from freemap.domain.value import Coordinate, TopicId


class SubmitPlaceRequest(BaseModel):
    """Submit place request.

    latitude/longitude come from the coordinate selected on the map;
    either being missing means no coordinate was selected.
    """

    topic_id: int
    name: str
    description: str = ""
    address: str = ""
    image_ref: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class SubmitPlaceResponse(BaseModel):
    """Submit place response."""

    place_id: Optional[int]
    created: bool


class SubmitPlaceUseCase:
    """Use case for submitting a place under the selected topic."""

    def __init__(self, entity_store: EntityStore) -> None:
        """Initialize submit place use case.

        Args:
            entity_store: Entity store domain service
        """
        self.entity_store = entity_store

    def execute(self, request: SubmitPlaceRequest) -> SubmitPlaceResponse:
        """Execute submit place flow.

        Invalid submissions (unknown topic, empty name, missing or non-finite
        coordinate) are ignored and reported as not created.
        """
        with logfire.span("submit_place.execute", topic_id=request.topic_id):
            place_id = self.entity_store.create_place(
                topic_id=TopicId(request.topic_id),
                name=request.name,
                description=request.description,
                coordinate=_coordinate(request.latitude, request.longitude),
                address=request.address,
                image_ref=request.image_ref,
            )
            return SubmitPlaceResponse(place_id=place_id, created=place_id is not None)


def _coordinate(
    latitude: Optional[float], longitude: Optional[float]
) -> Optional[Coordinate]:
    if latitude is None or longitude is None:
        return None
    try:
        return Coordinate(latitude=latitude, longitude=longitude)
    except ValidationError:
        return None
