from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
import re

from docsum.services.summary.types import SummaryOptions

NO_CONTENT_SUMMARY = "No significant content found"

STOPWORDS = frozenset(
    {
        "the", "and", "a", "to", "of", "in", "is", "it", "you", "that", "he", "was",
        "for", "on", "are", "with", "as", "this", "from", "have", "been", "has", "had",
        "not", "what", "all", "were", "when", "we", "there", "can", "an", "which",
        "their", "said", "if", "will", "would", "about", "them", "then", "she", "many",
        "these", "so", "some", "her", "like", "him", "into", "time", "could", "no",
        "make", "than", "first", "its", "who", "now",
    }
)

_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")
_PARAGRAPH_BREAK = "\n\n"


def _normalize(token: str) -> str:
    return _EDGE_PUNCTUATION.sub("", token.lower())


def tokenize(text: str, options: SummaryOptions) -> list[str]:
    tokens: list[str] = []
    for raw in text.split():
        token = _normalize(raw)
        if not token or len(token) < options.min_word_length:
            continue
        if options.exclude_common and token in STOPWORDS:
            continue
        tokens.append(token)
    return tokens


def rank_keywords(text: str, options: SummaryOptions) -> list[tuple[str, int]]:
    counts = Counter(tokenize(text, options))
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[: max(0, options.length)]


def summarize(text: str, options: SummaryOptions) -> str:
    top = rank_keywords(text, options)
    if not top:
        return NO_CONTENT_SUMMARY
    return ", ".join(f"{token} ({count})" for token, count in top)


def count_words(text: str) -> int:
    return len(text.split())


def iter_paragraphs(text: str) -> Iterator[str]:
    start = 0
    while True:
        end = text.find(_PARAGRAPH_BREAK, start)
        fragment = text[start:] if end == -1 else text[start:end]
        if fragment.strip():
            yield fragment
        if end == -1:
            return
        start = end + len(_PARAGRAPH_BREAK)


class Paragraphs:
    """Re-iterable view over the blank-line separated paragraphs of a text."""

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[str]:
        return iter_paragraphs(self._text)

    def __repr__(self) -> str:
        return f"Paragraphs(chars={len(self._text)})"
