"""Unit tests for GetPlaceUseCase and AddCommentUseCase."""

import pytest

from freemap.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from freemap.application.usecase.place import GetPlaceRequest, GetPlaceUseCase
from freemap.domain.service import EntityStore, VoteTracker
from freemap.domain.value import Coordinate
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def place_id(unit_env):
    store = unit_env.get(EntityStore)
    topic_id = store.create_topic("휠체어 가능한 가게")
    return store.create_place(
        topic_id, "서점 7", "엘리베이터 있음", Coordinate(latitude=37.57, longitude=126.98)
    )


class TestGetPlaceUseCase:
    """Tests for GetPlaceUseCase."""

    def test_comments_most_liked_first(self, unit_env, place_id):
        """Liked comments rise; ties keep the order they were added."""
        # Arrange
        add = unit_env.get(AddCommentUseCase)
        c1 = add.execute(AddCommentRequest(place_id=place_id, text="좋아요")).comment_id
        c2 = add.execute(AddCommentRequest(place_id=place_id, text="경사로 있음")).comment_id
        c3 = add.execute(AddCommentRequest(place_id=place_id, text="직원 친절")).comment_id
        unit_env.get(VoteTracker).cast_comment_vote(place_id, c2)

        # Act
        response = unit_env.get(GetPlaceUseCase).execute(
            GetPlaceRequest(place_id=place_id)
        )

        # Assert
        assert [c.comment_id for c in response.comments] == [c2, c1, c3]
        assert [c.liked_by_me for c in response.comments] == [True, False, False]
        assert response.place.comment_count == 3
        assert response.place.name == "서점 7"

    def test_unknown_place(self, unit_env):
        response = unit_env.get(GetPlaceUseCase).execute(GetPlaceRequest(place_id=42))

        assert response.place is None
        assert response.comments == []


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    def test_empty_comment_is_ignored(self, unit_env, place_id):
        response = unit_env.get(AddCommentUseCase).execute(
            AddCommentRequest(place_id=place_id, text="")
        )

        assert response.created is False
        assert unit_env.get(EntityStore).get_place(place_id).comments == ()

    def test_comment_on_unknown_place_is_ignored(self, unit_env):
        response = unit_env.get(AddCommentUseCase).execute(
            AddCommentRequest(place_id=42, text="좋아요")
        )

        assert response.created is False
        assert response.comment_id is None
