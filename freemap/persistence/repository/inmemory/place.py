"""In-memory place repository."""

from typing import Optional

from freemap.domain.model.place import Place
from freemap.domain.repository.place import PlaceRepository
from freemap.domain.value import PlaceId, TopicId


class InMemoryPlaceRepository(PlaceRepository):
    """In-memory implementation of PlaceRepository.

    Places are immutable, so replacing one keeps its position in the
    insertion-ordered dict.
    """

    def __init__(self) -> None:
        self._places: dict[PlaceId, Place] = {}

    def save(self, place: Place) -> Place:
        """Save or replace a place."""
        self._places[place.id] = place
        return place

    def find_by_id(self, place_id: PlaceId) -> Optional[Place]:
        """Find a place by ID."""
        return self._places.get(place_id)

    def find_all(self) -> list[Place]:
        """Find all places in creation order."""
        return list(self._places.values())

    def find_by_topic(self, topic_id: TopicId) -> list[Place]:
        """Find all places under a topic."""
        return [p for p in self._places.values() if p.topic_id == topic_id]
