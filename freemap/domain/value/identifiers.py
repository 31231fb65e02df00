"""Strongly typed identifiers for freemap domain entities.

All identifiers are drawn from a single monotonically increasing counter
owned by the entity store, so they never collide across entity kinds.
"""

from typing import NewType

TopicId = NewType("TopicId", int)
PlaceId = NewType("PlaceId", int)
CommentId = NewType("CommentId", int)
