"""In-memory implementation of Topic repository."""

from typing import Optional

from freemap.domain.model.topic import Topic
from freemap.domain.repository.topic import TopicRepository
from freemap.domain.value import TopicId


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._topics: dict[TopicId, Topic] = {}

    def save(self, topic: Topic) -> Topic:
        """Save a topic."""
        self._topics[topic.id] = topic
        return topic

    def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID."""
        return self._topics.get(topic_id)

    def find_all(self) -> list[Topic]:
        """Find all topics in creation order."""
        return list(self._topics.values())
