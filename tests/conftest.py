"""Test configuration and fixtures."""

import logfire

from freemap.domain.model.place import Place
from freemap.domain.value import Coordinate, PlaceId, TopicId

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

SEOUL_CITY_HALL = Coordinate(latitude=37.5665, longitude=126.978)


def make_place(
    place_id: int,
    likes: int = 0,
    latitude: float = 37.5665,
    longitude: float = 126.978,
    topic_id: int = 1,
) -> Place:
    """Helper to build a place directly, bypassing the store.

    Args:
        place_id: Place ID (also used to derive the name)
        likes: Like counter
        latitude: Latitude of the place
        longitude: Longitude of the place
        topic_id: Topic the place belongs to

    Returns:
        Place entity
    """
    return Place(
        id=PlaceId(place_id),
        topic_id=TopicId(topic_id),
        name=f"Place {place_id}",
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        likes=likes,
    )
