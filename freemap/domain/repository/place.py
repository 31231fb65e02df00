"""Place repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from freemap.domain.model.place import Place
from freemap.domain.value import PlaceId, TopicId


class PlaceRepository(ABC):
    """Repository for Place entities.

    Defines the contract for place storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def save(self, place: Place) -> Place:
        """Save or replace a place.

        Args:
            place: The place to save

        Returns:
            The saved place
        """
        pass

    @abstractmethod
    def find_by_id(self, place_id: PlaceId) -> Optional[Place]:
        """Find a place by ID.

        Args:
            place_id: The place's unique identifier

        Returns:
            The place if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Place]:
        """Find all places in creation order.

        Returns:
            List of places
        """
        pass

    @abstractmethod
    def find_by_topic(self, topic_id: TopicId) -> list[Place]:
        """Find all places tagged with a topic, in creation order.

        Args:
            topic_id: ID of the topic

        Returns:
            List of places under the topic
        """
        pass
