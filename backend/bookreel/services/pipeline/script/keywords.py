"""
Keyword extraction for scripts.
"""

import re
from collections import Counter
from typing import List

STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "be",
    "been", "being", "have", "has", "had", "do", "does", "did", "will",
    "would", "could", "should", "may", "might", "must", "can", "this",
    "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
})
TOPIC_KEYWORDS = ("motivation", "success", "growth")
MAX_KEYWORDS = 8
TOP_FREQUENT = 5

_NON_WORD = re.compile(r"[^\w]")


def _clean(word: str) -> str:
    return _NON_WORD.sub("", word.lower())


def extract_keywords(text: str, title: str) -> List[str]:
    """Title tokens, then the most frequent script words, then fixed topic words; first 8."""
    keywords: List[str] = []

    def add(word: str) -> None:
        if word not in keywords:
            keywords.append(word)

    for word in title.split():
        clean = _clean(word)
        if len(clean) > 2 and clean not in STOPWORDS:
            add(clean)

    frequency = Counter(
        clean for clean in (_clean(w) for w in text.split())
        if len(clean) > 3 and clean not in STOPWORDS
    )
    # Counter.most_common keeps first-seen order among ties
    for word, _ in frequency.most_common(TOP_FREQUENT):
        add(word)

    for word in TOPIC_KEYWORDS:
        add(word)

    return keywords[:MAX_KEYWORDS]
