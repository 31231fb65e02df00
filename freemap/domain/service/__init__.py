"""Domain services."""

from .base import Service
from .entity_store import EntityStore, StoreSnapshot
from .ranking_engine import RankingEngine, haversine_distance
from .search_index import SearchIndex, signature
from .vote_tracker import VoteTracker

__all__ = [
    "EntityStore",
    "RankingEngine",
    "SearchIndex",
    "Service",
    "StoreSnapshot",
    "VoteTracker",
    "haversine_distance",
    "signature",
]
