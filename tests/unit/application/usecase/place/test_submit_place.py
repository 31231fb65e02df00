"""Unit tests for SubmitPlaceUseCase."""

import pytest

from freemap.application.usecase.place import SubmitPlaceRequest, SubmitPlaceUseCase
from freemap.domain.service import EntityStore
from freemap.domain.value import Coordinate
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def topic_id(unit_env):
    return unit_env.get(EntityStore).create_topic("휠체어 가능한 가게")


class TestSubmitPlaceUseCase:
    """Tests for SubmitPlaceUseCase."""

    def test_place_is_created_at_selected_coordinate(self, unit_env, topic_id):
        # Arrange
        use_case = unit_env.get(SubmitPlaceUseCase)
        request = SubmitPlaceRequest(
            topic_id=topic_id,
            name="카페 12",
            description="입구에 경사로 설치",
            address="서울 중구 세종대로 110",
            latitude=37.5665,
            longitude=126.978,
        )

        # Act
        response = use_case.execute(request)

        # Assert
        assert response.created is True
        place = unit_env.get(EntityStore).get_place(response.place_id)
        assert place is not None
        assert place.topic_id == topic_id
        assert place.address == "서울 중구 세종대로 110"
        assert place.coordinate == Coordinate(latitude=37.5665, longitude=126.978)
        assert (place.likes, place.dislikes, place.flags) == (0, 0, 0)
        assert place.comments == ()

    def test_missing_coordinate_is_ignored(self, unit_env, topic_id):
        """Submitting before selecting a point on the map creates nothing."""
        response = unit_env.get(SubmitPlaceUseCase).execute(
            SubmitPlaceRequest(topic_id=topic_id, name="카페 12", latitude=37.5)
        )

        assert response.created is False
        assert unit_env.get(EntityStore).places_for_topic(topic_id) == []

    def test_non_finite_coordinate_is_ignored(self, unit_env, topic_id):
        response = unit_env.get(SubmitPlaceUseCase).execute(
            SubmitPlaceRequest(
                topic_id=topic_id,
                name="카페 12",
                latitude=float("nan"),
                longitude=126.978,
            )
        )

        assert response.created is False
        assert response.place_id is None

    def test_unknown_topic_is_ignored(self, unit_env):
        response = unit_env.get(SubmitPlaceUseCase).execute(
            SubmitPlaceRequest(
                topic_id=999, name="카페 12", latitude=37.5, longitude=127.0
            )
        )

        assert response.created is False
        assert unit_env.get(EntityStore).list_places() == []
