"""Vote use cases."""

from .cast_comment_vote import (
    CastCommentVoteRequest,
    CastCommentVoteResponse,
    CastCommentVoteUseCase,
)
from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase

__all__ = [
    "CastCommentVoteRequest",
    "CastCommentVoteResponse",
    "CastCommentVoteUseCase",
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
]
