"""Topic search domain service.

Suggestions match either the literal (lowercased) topic name or its phonetic
signature, where every Hangul syllable is replaced by its leading consonant.
Typing "ㄴㅋ" therefore finds "노키즈존" the same way typing "노키" does.
"""

from typing import Sequence

import logfire

from freemap.domain.model.topic import Topic

from .base import Service

HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3
# Syllables sharing a leading consonant: 21 vowels x 28 trailing consonants
SYLLABLES_PER_LEADING = 588

LEADING_CONSONANTS = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)  # fmt: skip


def signature(text: str) -> str:
    """Replace each Hangul syllable with its leading consonant.

    Other characters are kept unchanged.

    Args:
        text: Text to convert

    Returns:
        Phonetic signature of the text
    """
    chars = []
    for char in text:
        code = ord(char)
        if HANGUL_BASE <= code <= HANGUL_LAST:
            chars.append(
                LEADING_CONSONANTS[(code - HANGUL_BASE) // SYLLABLES_PER_LEADING]
            )
        else:
            chars.append(char)
    return "".join(chars)


class SearchIndex(Service):
    """Domain service producing topic suggestions for a query."""

    def suggest(self, query: str, topics: Sequence[Topic]) -> list[Topic]:
        """Find topics matching a query.

        Topics whose name or signature starts with the query come first,
        followed by topics that only contain it. Both groups keep the order
        of `topics`.

        Args:
            query: Raw text typed by the user
            topics: Topics to search, in display order

        Returns:
            Matching topics; empty for an empty query
        """
        if not query:
            return []

        with logfire.span("search_index.suggest", query=query):
            q = query.lower()
            sq = signature(q)

            prefix: list[Topic] = []
            substring: list[Topic] = []
            for topic in topics:
                name = topic.name.lower()
                sig = signature(name)
                if name.startswith(q) or sig.startswith(sq):
                    prefix.append(topic)
                elif q in name or sq in sig:
                    substring.append(topic)

            logfire.info(
                "Topics suggested",
                query=query,
                prefix_count=len(prefix),
                substring_count=len(substring),
            )
            return prefix + substring

    def can_offer_create(
        self, query: str, topics: Sequence[Topic], suggestions: Sequence[Topic]
    ) -> bool:
        """Whether to offer creating a new topic named exactly `query`.

        Only offered when nothing matched and no topic already carries the
        exact (case-sensitive, untrimmed) name.
        """
        if not query or suggestions:
            return False
        return all(topic.name != query for topic in topics)
