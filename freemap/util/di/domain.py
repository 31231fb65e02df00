"""Domain layer DI providers."""

from dishka import Scope, provide

from freemap.config import StorageSettings
from freemap.domain.repository import (
    PlaceRepository,
    TopicRepository,
    VoteStateRepository,
)
from freemap.domain.service import (
    EntityStore,
    RankingEngine,
    SearchIndex,
    VoteTracker,
)
from freemap.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: the store and the vote tracker hold the
    state of the whole session, so every request must see the same instances.
    """

    scope = Scope.APP

    @provide
    def get_entity_store(
        self, topic_repository: TopicRepository, place_repository: PlaceRepository
    ) -> EntityStore:
        """Provide entity store domain service."""
        return EntityStore(
            topic_repository=topic_repository, place_repository=place_repository
        )

    @provide
    def get_vote_tracker(
        self,
        entity_store: EntityStore,
        vote_state_repository: VoteStateRepository,
        storage_settings: StorageSettings,
    ) -> VoteTracker:
        """Provide vote tracker domain service."""
        return VoteTracker(
            entity_store=entity_store,
            vote_state_repository=vote_state_repository,
            storage_key=storage_settings.vote_state_key,
        )

    @provide
    def get_search_index(self) -> SearchIndex:
        """Provide search index domain service."""
        return SearchIndex()

    @provide
    def get_ranking_engine(self) -> RankingEngine:
        """Provide ranking engine domain service."""
        return RankingEngine()
