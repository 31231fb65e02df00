"""Unit tests for vote use cases."""

import pytest

from freemap.application.usecase.vote import (
    CastCommentVoteRequest,
    CastCommentVoteUseCase,
    CastVoteRequest,
    CastVoteUseCase,
)
from freemap.config import StorageSettings
from freemap.domain.repository import VoteStateRepository
from freemap.domain.service import EntityStore
from freemap.domain.value import Coordinate, VoteKind
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def place_id(unit_env):
    store = unit_env.get(EntityStore)
    topic_id = store.create_topic("노키즈존")
    return store.create_place(
        topic_id, "카페 3", "", Coordinate(latitude=37.56, longitude=126.97)
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    def test_like_then_switch_to_dislike(self, unit_env, place_id):
        """Switching moves the vote from one counter to the other."""
        # Arrange
        use_case = unit_env.get(CastVoteUseCase)

        # Act
        liked = use_case.execute(CastVoteRequest(place_id=place_id, kind=VoteKind.LIKE))
        switched = use_case.execute(
            CastVoteRequest(place_id=place_id, kind=VoteKind.DISLIKE)
        )

        # Assert
        assert (liked.likes, liked.dislikes, liked.my_vote) == (1, 0, VoteKind.LIKE)
        assert (switched.likes, switched.dislikes, switched.my_vote) == (
            0,
            1,
            VoteKind.DISLIKE,
        )

    def test_same_vote_twice_withdraws(self, unit_env, place_id):
        use_case = unit_env.get(CastVoteUseCase)

        use_case.execute(CastVoteRequest(place_id=place_id, kind=VoteKind.FLAG))
        response = use_case.execute(CastVoteRequest(place_id=place_id, kind=VoteKind.FLAG))

        assert response.applied is True
        assert response.my_vote is None
        assert response.flags == 0

    def test_vote_is_persisted(self, unit_env, place_id):
        unit_env.get(CastVoteUseCase).execute(
            CastVoteRequest(place_id=place_id, kind=VoteKind.LIKE)
        )

        blob = unit_env.get(VoteStateRepository).load(
            unit_env.get(StorageSettings).vote_state_key
        )

        assert blob == f'{{"{place_id}":"like"}}'

    def test_vote_on_unknown_place(self, unit_env):
        response = unit_env.get(CastVoteUseCase).execute(
            CastVoteRequest(place_id=42, kind=VoteKind.LIKE)
        )

        assert response.applied is False
        assert response.my_vote is None


class TestCastCommentVoteUseCase:
    """Tests for CastCommentVoteUseCase."""

    def test_like_toggles(self, unit_env, place_id):
        comment_id = unit_env.get(EntityStore).append_comment(place_id, "조용해요")
        use_case = unit_env.get(CastCommentVoteUseCase)
        request = CastCommentVoteRequest(place_id=place_id, comment_id=comment_id)

        first = use_case.execute(request)
        second = use_case.execute(request)

        assert (first.applied, first.liked, first.likes) == (True, True, 1)
        assert (second.applied, second.liked, second.likes) == (True, False, 0)

    def test_unknown_comment(self, unit_env, place_id):
        response = unit_env.get(CastCommentVoteUseCase).execute(
            CastCommentVoteRequest(place_id=place_id, comment_id=999)
        )

        assert response.applied is False
        assert response.liked is False
