"""Entity store domain service.

Owns topics, places and comments, assigns their identifiers and exposes the
only operations allowed to change them. Invalid submissions are ignored: the
operation logs a warning and returns None instead of raising.
"""

import math
import threading
from dataclasses import dataclass
from typing import Literal, Optional

import logfire

from freemap.domain.model.comment import Comment
from freemap.domain.model.place import Place
from freemap.domain.model.topic import Topic
from freemap.domain.repository import PlaceRepository, TopicRepository
from freemap.domain.value import CommentId, Coordinate, PlaceId, TopicId, VoteKind

from .base import Service

Delta = Literal[1, -1]

_COUNTER_FIELDS: dict[VoteKind, str] = {
    VoteKind.LIKE: "likes",
    VoteKind.DISLIKE: "dislikes",
    VoteKind.FLAG: "flags",
}


def _is_finite(coordinate: Coordinate) -> bool:
    return math.isfinite(coordinate.latitude) and math.isfinite(coordinate.longitude)


@dataclass(frozen=True)
class StoreSnapshot:
    """Consistent view of the store taken under its lock."""

    topics: tuple[Topic, ...]
    places: tuple[Place, ...]

    def places_for_topic(self, topic_id: TopicId) -> list[Place]:
        """Places under a topic, in creation order."""
        return [p for p in self.places if p.topic_id == topic_id]


class EntityStore(Service):
    """Domain service owning all topic, place and comment records.

    Counter mutations (adjust_place_counter, adjust_comment_like) are reserved
    for the vote tracker; other callers go through VoteTracker.cast_vote.
    """

    def __init__(
        self, topic_repository: TopicRepository, place_repository: PlaceRepository
    ) -> None:
        """Initialize entity store.

        Args:
            topic_repository: Topic repository
            place_repository: Place repository
        """
        self.topic_repository = topic_repository
        self.place_repository = place_repository
        self._lock = threading.RLock()
        self._last_id = 0

    def _next_id(self) -> int:
        # Caller holds the lock
        self._last_id += 1
        return self._last_id

    def create_topic(self, name: str) -> Optional[TopicId]:
        """Create a topic.

        Args:
            name: Topic name

        Returns:
            ID of the new topic, or None if the name is empty
        """
        with logfire.span("entity_store.create_topic", name=name):
            if not name:
                logfire.warn("Ignored topic with empty name")
                return None

            with self._lock:
                topic = Topic(id=TopicId(self._next_id()), name=name)
                self.topic_repository.save(topic)

            logfire.info("Topic created", topic_id=topic.id, name=name)
            return topic.id

    def create_place(
        self,
        topic_id: TopicId,
        name: str,
        description: str,
        coordinate: Optional[Coordinate],
        address: str = "",
        image_ref: Optional[str] = None,
    ) -> Optional[PlaceId]:
        """Create a place under a topic.

        Args:
            topic_id: Topic the place is tagged with
            name: Place name
            description: Free-form description
            coordinate: Selected map coordinate
            address: Street address
            image_ref: Reference to an uploaded image

        Returns:
            ID of the new place, or None if the submission is invalid
        """
        with logfire.span(
            "entity_store.create_place", topic_id=topic_id, name=name
        ):
            if not name:
                logfire.warn("Ignored place with empty name", topic_id=topic_id)
                return None
            if coordinate is None or not _is_finite(coordinate):
                logfire.warn("Ignored place without valid coordinate", name=name)
                return None

            with self._lock:
                if self.topic_repository.find_by_id(topic_id) is None:
                    logfire.warn("Ignored place for unknown topic", topic_id=topic_id)
                    return None

                place = Place(
                    id=PlaceId(self._next_id()),
                    topic_id=topic_id,
                    name=name,
                    description=description,
                    address=address,
                    image_ref=image_ref,
                    coordinate=coordinate,
                )
                self.place_repository.save(place)

            logfire.info("Place created", place_id=place.id, topic_id=topic_id)
            return place.id

    def append_comment(self, place_id: PlaceId, text: str) -> Optional[CommentId]:
        """Append a comment to a place.

        Args:
            place_id: Place ID
            text: Comment text

        Returns:
            ID of the new comment, or None if the place is unknown or text empty
        """
        with logfire.span("entity_store.append_comment", place_id=place_id):
            if not text:
                logfire.warn("Ignored empty comment", place_id=place_id)
                return None

            with self._lock:
                place = self.place_repository.find_by_id(place_id)
                if place is None:
                    logfire.warn("Comment on non-existent place", place_id=place_id)
                    return None

                comment = Comment(id=CommentId(self._next_id()), text=text)
                self.place_repository.save(
                    place.model_copy(update={"comments": place.comments + (comment,)})
                )

            logfire.info("Comment added", place_id=place_id, comment_id=comment.id)
            return comment.id

    def adjust_place_counter(
        self, place_id: PlaceId, kind: VoteKind, delta: Delta
    ) -> None:
        """Change one vote counter of a place by one, never below zero.

        Args:
            place_id: Place ID
            kind: Which counter to change
            delta: +1 or -1
        """
        field = _COUNTER_FIELDS[kind]
        with self._lock:
            place = self.place_repository.find_by_id(place_id)
            if place is None:
                logfire.warn("Counter change on non-existent place", place_id=place_id)
                return

            value = max(0, getattr(place, field) + delta)
            self.place_repository.save(place.model_copy(update={field: value}))

    def adjust_comment_like(
        self, place_id: PlaceId, comment_id: CommentId, delta: Delta
    ) -> None:
        """Change the like counter of one comment by one, never below zero.

        Args:
            place_id: Place the comment belongs to
            comment_id: Comment ID
            delta: +1 or -1
        """
        with self._lock:
            place = self.place_repository.find_by_id(place_id)
            if place is None or place.find_comment(comment_id) is None:
                logfire.warn(
                    "Like change on non-existent comment",
                    place_id=place_id,
                    comment_id=comment_id,
                )
                return

            comments = tuple(
                c.model_copy(update={"likes": max(0, c.likes + delta)})
                if c.id == comment_id
                else c
                for c in place.comments
            )
            self.place_repository.save(place.model_copy(update={"comments": comments}))

    def get_topic(self, topic_id: TopicId) -> Optional[Topic]:
        """Get a topic by ID."""
        with self._lock:
            return self.topic_repository.find_by_id(topic_id)

    def get_place(self, place_id: PlaceId) -> Optional[Place]:
        """Get a place by ID."""
        with self._lock:
            return self.place_repository.find_by_id(place_id)

    def list_topics(self) -> list[Topic]:
        """All topics in creation order."""
        with self._lock:
            return self.topic_repository.find_all()

    def list_places(self) -> list[Place]:
        """All places in creation order."""
        with self._lock:
            return self.place_repository.find_all()

    def places_for_topic(self, topic_id: TopicId) -> list[Place]:
        """Places under a topic, in creation order."""
        with self._lock:
            return self.place_repository.find_by_topic(topic_id)

    def snapshot(self) -> StoreSnapshot:
        """Take a consistent snapshot of all topics and places.

        Records are immutable, so the snapshot cannot observe later mutations.
        """
        with self._lock:
            return StoreSnapshot(
                topics=tuple(self.topic_repository.find_all()),
                places=tuple(self.place_repository.find_all()),
            )
