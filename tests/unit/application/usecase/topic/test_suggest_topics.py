"""Unit tests for topic use cases."""

from freemap.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicUseCase,
    ListTopicsUseCase,
    SuggestTopicsRequest,
    SuggestTopicsUseCase,
)
from freemap.domain.service import EntityStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAndListTopics:
    """Tests for CreateTopicUseCase and ListTopicsUseCase."""

    def test_created_topics_are_listed_in_creation_order(self, unit_env):
        create = unit_env.get(CreateTopicUseCase)

        first = create.execute(CreateTopicRequest(name="노키즈존"))
        second = create.execute(CreateTopicRequest(name="휠체어 가능한 가게"))

        assert first.created and second.created
        topics = unit_env.get(ListTopicsUseCase).execute().topics
        assert [t.name for t in topics] == ["노키즈존", "휠체어 가능한 가게"]
        assert [t.topic_id for t in topics] == [first.topic_id, second.topic_id]

    def test_empty_name_is_not_created(self, unit_env):
        response = unit_env.get(CreateTopicUseCase).execute(CreateTopicRequest(name=""))

        assert response.created is False
        assert response.topic_id is None
        assert unit_env.get(ListTopicsUseCase).execute().topics == []


class TestSuggestTopicsUseCase:
    """Tests for SuggestTopicsUseCase."""

    def test_consonant_query_suggests_topic(self, unit_env):
        """Typing leading consonants finds the topic."""
        # Arrange
        store = unit_env.get(EntityStore)
        store.create_topic("휠체어 가능한 가게")
        nokids_id = store.create_topic("노키즈존")
        use_case = unit_env.get(SuggestTopicsUseCase)

        # Act
        response = use_case.execute(SuggestTopicsRequest(query="ㄴㅋ"))

        # Assert
        assert [t.topic_id for t in response.suggestions] == [nokids_id]
        assert response.can_create is False

    def test_prefix_matches_precede_substring_matches(self, unit_env):
        store = unit_env.get(EntityStore)
        store.create_topic("애견 카페")
        store.create_topic("카페 추천")

        response = unit_env.get(SuggestTopicsUseCase).execute(
            SuggestTopicsRequest(query="카페")
        )

        assert [t.name for t in response.suggestions] == ["카페 추천", "애견 카페"]

    def test_unmatched_query_offers_create(self, unit_env):
        """Nothing matches, so the user may create the topic."""
        unit_env.get(EntityStore).create_topic("노키즈존")

        response = unit_env.get(SuggestTopicsUseCase).execute(
            SuggestTopicsRequest(query="반려견 동반")
        )

        assert response.suggestions == []
        assert response.can_create is True

    def test_empty_query_offers_nothing(self, unit_env):
        unit_env.get(EntityStore).create_topic("노키즈존")

        response = unit_env.get(SuggestTopicsUseCase).execute(
            SuggestTopicsRequest(query="")
        )

        assert response.suggestions == []
        assert response.can_create is False
