"""Create topic use case."""

from typing import Optional

from pydantic import BaseModel

from freemap.domain.service import EntityStore


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    name: str


class CreateTopicResponse(BaseModel):
    """Create topic response."""

    topic_id: Optional[int]
    created: bool


class CreateTopicUseCase:
    """Use case for creating a new topic."""

    def __init__(self, entity_store: EntityStore) -> None:
        """Initialize create topic use case.

        Args:
            entity_store: Entity store domain service
        """
        self.entity_store = entity_store

    def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        An empty name is ignored and reported as not created.
        """
        topic_id = self.entity_store.create_topic(request.name)
        return CreateTopicResponse(topic_id=topic_id, created=topic_id is not None)
