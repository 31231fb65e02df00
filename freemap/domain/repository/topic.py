"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from freemap.domain.model.topic import Topic
from freemap.domain.value import TopicId


class TopicRepository(ABC):
    """Repository interface for Topic entities."""

    @abstractmethod
    def save(self, topic: Topic) -> Topic:
        """Save a topic.

        Args:
            topic: Topic to save

        Returns:
            Saved topic
        """
        pass

    @abstractmethod
    def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID.

        Args:
            topic_id: Topic identifier

        Returns:
            Topic if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Topic]:
        """Find all topics in creation order.

        Returns:
            List of topics
        """
        pass
