"""Vote tracker domain service."""

import threading
from typing import Optional

import logfire
from pydantic import TypeAdapter, ValidationError

from freemap.domain.model.vote import VoteRecord
from freemap.domain.repository import VoteStateRepository
from freemap.domain.value import CommentId, PlaceId, VoteKind

from .base import Service
from .entity_store import EntityStore

_PLACE_VOTES = TypeAdapter(dict[PlaceId, VoteKind])


class VoteTracker(Service):
    """Domain service for this user's votes.

    Keeps the per-user vote record and the entity store counters consistent:
    it is the only caller of the store's counter operations. A user holds at
    most one vote kind per place; casting the same kind again withdraws it,
    casting a different kind switches to it.

    Place votes are persisted after every successful vote. Comment likes are
    kept for the session only.
    """

    def __init__(
        self,
        entity_store: EntityStore,
        vote_state_repository: VoteStateRepository,
        storage_key: str,
    ) -> None:
        """Initialize vote tracker.

        Args:
            entity_store: Entity store holding the counters
            vote_state_repository: Storage for the serialized place votes
            storage_key: Key the place votes are stored under
        """
        self.entity_store = entity_store
        self.vote_state_repository = vote_state_repository
        self.storage_key = storage_key
        self._record = VoteRecord()
        self._lock = threading.RLock()

    def load(self) -> None:
        """Restore place votes from storage and re-apply them to the counters.

        The store is rebuilt on every start, so each restored vote is counted
        again on its place. Votes for places that no longer exist are dropped.
        Missing or unreadable state is treated as no votes.
        """
        with logfire.span("vote_tracker.load", key=self.storage_key):
            blob = self.vote_state_repository.load(self.storage_key)
            if blob is None:
                place_votes = {}
            else:
                try:
                    place_votes = _PLACE_VOTES.validate_json(blob)
                except ValidationError as e:
                    logfire.warn(
                        "Discarded unreadable vote state",
                        key=self.storage_key,
                        error=str(e),
                    )
                    place_votes = {}

            with self._lock:
                # Withdraw the votes currently counted before replacing them
                for place_id, kind in self._record.place_votes.items():
                    self.entity_store.adjust_place_counter(place_id, kind, -1)

                restored = {}
                for place_id, kind in place_votes.items():
                    if self.entity_store.get_place(place_id) is None:
                        logfire.warn(
                            "Dropped vote for unknown place", place_id=place_id
                        )
                        continue
                    self.entity_store.adjust_place_counter(place_id, kind, 1)
                    restored[place_id] = kind

                self._record = VoteRecord(
                    place_votes=restored, comment_likes=self._record.comment_likes
                )
            logfire.info(
                "Vote state loaded",
                count=len(restored),
                dropped=len(place_votes) - len(restored),
            )

    def dump(self) -> str:
        """Serialize place votes as a JSON object of place ID to vote kind."""
        with self._lock:
            return _PLACE_VOTES.dump_json(self._record.place_votes).decode()

    def cast_vote(self, place_id: PlaceId, kind: VoteKind) -> bool:
        """Cast, withdraw or switch this user's vote on a place.

        Args:
            place_id: Place ID
            kind: Vote kind requested

        Returns:
            True if the vote was applied, False if the place does not exist
        """
        with logfire.span("vote_tracker.cast_vote", place_id=place_id, kind=kind.value):
            with self._lock:
                if self.entity_store.get_place(place_id) is None:
                    logfire.warn("Vote on non-existent place", place_id=place_id)
                    return False

                current = self._record.place_votes.get(place_id)
                if current == kind:
                    self.entity_store.adjust_place_counter(place_id, kind, -1)
                    del self._record.place_votes[place_id]
                elif current is None:
                    self.entity_store.adjust_place_counter(place_id, kind, 1)
                    self._record.place_votes[place_id] = kind
                else:
                    self.entity_store.adjust_place_counter(place_id, current, -1)
                    self.entity_store.adjust_place_counter(place_id, kind, 1)
                    self._record.place_votes[place_id] = kind

                self._persist()

            logfire.info(
                "Vote cast",
                place_id=place_id,
                previous=current.value if current else None,
                current=self.vote_for(place_id),
            )
            return True

    def cast_comment_vote(self, place_id: PlaceId, comment_id: CommentId) -> bool:
        """Toggle this user's like on a comment.

        Args:
            place_id: Place the comment belongs to
            comment_id: Comment ID

        Returns:
            True if the like was toggled, False if the comment does not exist
        """
        with logfire.span(
            "vote_tracker.cast_comment_vote", place_id=place_id, comment_id=comment_id
        ):
            with self._lock:
                place = self.entity_store.get_place(place_id)
                if place is None or place.find_comment(comment_id) is None:
                    logfire.warn(
                        "Vote on non-existent comment",
                        place_id=place_id,
                        comment_id=comment_id,
                    )
                    return False

                if comment_id in self._record.comment_likes:
                    self.entity_store.adjust_comment_like(place_id, comment_id, -1)
                    self._record.comment_likes.discard(comment_id)
                else:
                    self.entity_store.adjust_comment_like(place_id, comment_id, 1)
                    self._record.comment_likes.add(comment_id)

            return True

    def vote_for(self, place_id: PlaceId) -> Optional[VoteKind]:
        """This user's vote on a place, or None."""
        with self._lock:
            return self._record.place_votes.get(place_id)

    def has_liked_comment(self, comment_id: CommentId) -> bool:
        """Whether this user has liked a comment."""
        with self._lock:
            return comment_id in self._record.comment_likes

    def place_votes(self) -> dict[PlaceId, VoteKind]:
        """Copy of this user's place votes."""
        with self._lock:
            return dict(self._record.place_votes)

    def _persist(self) -> None:
        # Caller holds the lock
        self.vote_state_repository.save(self.storage_key, self.dump())
