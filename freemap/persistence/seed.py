"""Demo data seeding.

Populates an empty store with the two launch topics and randomly placed
entries around central Seoul, so the map has something to show.
"""

import random

import logfire

from freemap.config import SeedSettings
from freemap.domain.service import EntityStore
from freemap.domain.value import Coordinate

PLACE_KINDS = [
    "카페", "식당", "서점", "공원", "미용실", "편의점", "약국", "도서관", "헬스장", "마트",
    "분식집", "피자집", "치킨집", "병원", "베이커리", "커피숍", "PC방", "노래방", "호텔", "게스트하우스",
]  # fmt: skip

# Launch topics and the descriptions their generated places draw from
SEED_TOPICS: list[tuple[str, list[str]]] = [
    (
        "휠체어 가능한 가게",
        [
            "휠체어 입장 가능",
            "장애인 화장실 있음",
            "입구에 경사로 설치",
            "직원들이 친절하게 도와줌",
            "테이블 간격 넓음",
            "엘리베이터 있음",
            "장애인 주차장 있음",
            "화장실 접근성 우수",
            "출입문 자동문",
            "휠체어 이동 동선 확보",
        ],
    ),
    (
        "노키즈존",
        [
            "노키즈존(아동 출입 제한)",
            "만 13세 미만 출입 불가",
            "조용한 분위기 유지",
            "아이 동반 시 입장 제한",
            "성인 전용 공간",
            "유아/아동 동반 불가",
            "노키즈존 안내문 부착",
            "아이 울음소리 걱정 없음",
            "어린이 출입 제한",
            "성인만 이용 가능",
        ],
    ),
]


def seed_store(store: EntityStore, settings: SeedSettings) -> int:
    """Create the launch topics and their random places.

    Args:
        store: Entity store to populate
        settings: Seed settings

    Returns:
        Number of places created
    """
    rng = random.Random(settings.random_seed)
    created = 0

    with logfire.span("seed_store", places_per_topic=settings.places_per_topic):
        for topic_name, descriptions in SEED_TOPICS:
            topic_id = store.create_topic(topic_name)
            if topic_id is None:
                continue

            for _ in range(settings.places_per_topic):
                coordinate = Coordinate(
                    latitude=settings.south + rng.random() * settings.span,
                    longitude=settings.west + rng.random() * settings.span,
                )
                place_id = store.create_place(
                    topic_id=topic_id,
                    name=f"{rng.choice(PLACE_KINDS)} {rng.randrange(1000)}",
                    description=rng.choice(descriptions),
                    coordinate=coordinate,
                )
                if place_id is not None:
                    created += 1

        logfire.info("Store seeded", topics=len(SEED_TOPICS), places=created)
        return created
