"""Add comment use case."""

from typing import Optional

from pydantic import BaseModel

from freemap.domain.service import EntityStore
from freemap.domain.value import PlaceId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    place_id: int
    text: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment_id: Optional[int]
    created: bool


class AddCommentUseCase:
    """Use case for commenting on a place."""

    def __init__(self, entity_store: EntityStore) -> None:
        """Initialize add comment use case.

        Args:
            entity_store: Entity store domain service
        """
        self.entity_store = entity_store

    def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Empty text or an unknown place is ignored and reported as not created.
        """
        comment_id = self.entity_store.append_comment(
            PlaceId(request.place_id), request.text
        )
        return AddCommentResponse(comment_id=comment_id, created=comment_id is not None)
