"""Place ranking domain service."""

import math
from typing import Optional, Sequence

import logfire

from freemap.domain.error import LocationRequiredError
from freemap.domain.model.comment import Comment
from freemap.domain.model.place import Place
from freemap.domain.value import Coordinate, RankingMode

from .base import Service

EARTH_RADIUS_M = 6_371_000.0


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in meters."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    h = min(h, 1.0)  # rounding near antipodes
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))


class RankingEngine(Service):
    """Domain service ordering places and comments for display.

    All sorts are stable: entries that compare equal keep their input order.
    """

    def rank(
        self,
        places: Sequence[Place],
        mode: RankingMode,
        reference: Optional[Coordinate] = None,
    ) -> list[Place]:
        """Order places of one topic.

        Args:
            places: Places to order
            mode: RECOMMEND (most liked first) or DISTANCE (nearest first)
            reference: User's coordinate, required for DISTANCE

        Returns:
            Places in display order

        Raises:
            LocationRequiredError: If DISTANCE is requested without a reference
        """
        with logfire.span("ranking_engine.rank", mode=mode.value, count=len(places)):
            if mode == RankingMode.RECOMMEND:
                return sorted(places, key=lambda p: p.likes, reverse=True)

            if reference is None:
                logfire.warn("Distance ranking without reference location")
                raise LocationRequiredError()

            return sorted(
                places, key=lambda p: haversine_distance(reference, p.coordinate)
            )

    def rank_comments(self, comments: Sequence[Comment]) -> list[Comment]:
        """Order comments most liked first, ties in insertion order."""
        return sorted(comments, key=lambda c: c.likes, reverse=True)
