#!/usr/bin/env python3
"""Start freemap and print a summary of the loaded state."""

import sys

import logfire

from freemap.app import create_app
from freemap.application.location import LocationSession
from freemap.application.usecase.place import ListPlacesRequest, ListPlacesUseCase
from freemap.application.usecase.topic import ListTopicsUseCase
from freemap.domain.service import VoteTracker


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    try:
        container = create_app()
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    try:
        view = container.get(LocationSession).view()
        print(
            f"Map centre: {view.center.latitude:.4f}, {view.center.longitude:.4f}"
            f" (zoom {view.zoom}, {'located' if view.located else 'fallback'})"
        )
        print(f"Recorded votes: {len(container.get(VoteTracker).place_votes())}")

        with container() as request_container:
            topics = request_container.get(ListTopicsUseCase).execute().topics
            list_places = request_container.get(ListPlacesUseCase)
            for topic in topics:
                places = list_places.execute(
                    ListPlacesRequest(topic_id=topic.topic_id)
                ).places
                print(f"[{topic.topic_id}] {topic.name}: {len(places)} places")
    finally:
        container.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
