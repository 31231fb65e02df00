"""Application layer DI providers."""

from dishka import Scope, provide

from freemap.adapter.geolocation import GeolocationClient
from freemap.application.location import LocationSession
from freemap.application.usecase.comment import AddCommentUseCase
from freemap.application.usecase.place import (
    GetPlaceUseCase,
    ListPlacesUseCase,
    SubmitPlaceUseCase,
)
from freemap.application.usecase.topic import (
    CreateTopicUseCase,
    ListTopicsUseCase,
    SuggestTopicsUseCase,
)
from freemap.application.usecase.vote import CastCommentVoteUseCase, CastVoteUseCase
from freemap.config import MapSettings, RankingSettings
from freemap.domain.service import (
    EntityStore,
    RankingEngine,
    SearchIndex,
    VoteTracker,
)
from freemap.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_location_session(
        self, geolocation_client: GeolocationClient, map_settings: MapSettings
    ) -> LocationSession:
        """Provide the cached user location."""
        return LocationSession(
            geolocation_client=geolocation_client, map_settings=map_settings
        )

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self, entity_store: EntityStore
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(entity_store=entity_store)

    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(self, entity_store: EntityStore) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(entity_store=entity_store)

    @provide(scope=Scope.REQUEST)
    def get_suggest_topics_use_case(
        self, entity_store: EntityStore, search_index: SearchIndex
    ) -> SuggestTopicsUseCase:
        """Provide suggest topics use case."""
        return SuggestTopicsUseCase(
            entity_store=entity_store, search_index=search_index
        )

    # Place use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_place_use_case(
        self, entity_store: EntityStore
    ) -> SubmitPlaceUseCase:
        """Provide submit place use case."""
        return SubmitPlaceUseCase(entity_store=entity_store)

    @provide(scope=Scope.REQUEST)
    def get_list_places_use_case(
        self,
        entity_store: EntityStore,
        ranking_engine: RankingEngine,
        vote_tracker: VoteTracker,
        location_session: LocationSession,
        ranking_settings: RankingSettings,
    ) -> ListPlacesUseCase:
        """Provide list places use case."""
        return ListPlacesUseCase(
            entity_store=entity_store,
            ranking_engine=ranking_engine,
            vote_tracker=vote_tracker,
            location_session=location_session,
            ranking_settings=ranking_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_place_use_case(
        self,
        entity_store: EntityStore,
        ranking_engine: RankingEngine,
        vote_tracker: VoteTracker,
        location_session: LocationSession,
    ) -> GetPlaceUseCase:
        """Provide get place use case."""
        return GetPlaceUseCase(
            entity_store=entity_store,
            ranking_engine=ranking_engine,
            vote_tracker=vote_tracker,
            location_session=location_session,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(self, entity_store: EntityStore) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(entity_store=entity_store)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_tracker: VoteTracker, entity_store: EntityStore
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_tracker=vote_tracker, entity_store=entity_store)

    @provide(scope=Scope.REQUEST)
    def get_cast_comment_vote_use_case(
        self, vote_tracker: VoteTracker, entity_store: EntityStore
    ) -> CastCommentVoteUseCase:
        """Provide cast comment vote use case."""
        return CastCommentVoteUseCase(
            vote_tracker=vote_tracker, entity_store=entity_store
        )
