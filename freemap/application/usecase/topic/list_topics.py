"""List topics use case."""

from pydantic import BaseModel

from freemap.domain.service import EntityStore


class TopicItem(BaseModel):
    """Topic item in response."""

    topic_id: int
    name: str


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicItem]


class ListTopicsUseCase:
    """Use case for listing all topics in creation order."""

    def __init__(self, entity_store: EntityStore) -> None:
        self.entity_store = entity_store

    def execute(self) -> ListTopicsResponse:
        """Execute list topics flow."""
        return ListTopicsResponse(
            topics=[
                TopicItem(topic_id=topic.id, name=topic.name)
                for topic in self.entity_store.list_topics()
            ]
        )
