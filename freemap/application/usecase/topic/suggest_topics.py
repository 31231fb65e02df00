"""Suggest topics use case."""

import logfire
from pydantic import BaseModel

from freemap.application.usecase.topic.list_topics import TopicItem
from freemap.domain.service import EntityStore, SearchIndex


class SuggestTopicsRequest(BaseModel):
    """Suggest topics request."""

    query: str


class SuggestTopicsResponse(BaseModel):
    """Suggest topics response."""

    query: str
    suggestions: list[TopicItem]
    # Whether the UI should offer "create topic <query>"
    can_create: bool


class SuggestTopicsUseCase:
    """Use case for topic suggestions while the user types."""

    def __init__(self, entity_store: EntityStore, search_index: SearchIndex) -> None:
        """Initialize suggest topics use case.

        Args:
            entity_store: Entity store domain service
            search_index: Search index domain service
        """
        self.entity_store = entity_store
        self.search_index = search_index

    def execute(self, request: SuggestTopicsRequest) -> SuggestTopicsResponse:
        """Execute suggest topics flow.

        Args:
            request: Suggest topics request with the raw query

        Returns:
            Matching topics (prefix matches first) and the create affordance
        """
        with logfire.span("suggest_topics.execute", query=request.query):
            topics = self.entity_store.snapshot().topics
            suggestions = self.search_index.suggest(request.query, topics)
            can_create = self.search_index.can_offer_create(
                request.query, topics, suggestions
            )

            return SuggestTopicsResponse(
                query=request.query,
                suggestions=[
                    TopicItem(topic_id=topic.id, name=topic.name)
                    for topic in suggestions
                ],
                can_create=can_create,
            )
