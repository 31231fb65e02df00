"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .list_topics import ListTopicsResponse, ListTopicsUseCase, TopicItem
from .suggest_topics import (
    SuggestTopicsRequest,
    SuggestTopicsResponse,
    SuggestTopicsUseCase,
)

__all__ = [
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "ListTopicsResponse",
    "ListTopicsUseCase",
    "TopicItem",
    "SuggestTopicsRequest",
    "SuggestTopicsResponse",
    "SuggestTopicsUseCase",
]
