"""Place use cases."""

from .get_place import CommentItem, GetPlaceRequest, GetPlaceResponse, GetPlaceUseCase
from .list_places import (
    ListPlacesRequest,
    ListPlacesResponse,
    ListPlacesUseCase,
    PlaceItem,
)
from .submit_place import SubmitPlaceRequest, SubmitPlaceResponse, SubmitPlaceUseCase

__all__ = [
    "CommentItem",
    "GetPlaceRequest",
    "GetPlaceResponse",
    "GetPlaceUseCase",
    "ListPlacesRequest",
    "ListPlacesResponse",
    "ListPlacesUseCase",
    "PlaceItem",
    "SubmitPlaceRequest",
    "SubmitPlaceResponse",
    "SubmitPlaceUseCase",
]
