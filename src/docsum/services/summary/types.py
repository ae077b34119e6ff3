from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryOptions:
    length: int = 20
    min_word_length: int = 4
    exclude_common: bool = False


@dataclass(frozen=True)
class DocumentRecord:
    id: str
    filename: str
    timestamp: str
    word_count: int
    summary: str


@dataclass(frozen=True)
class SummaryResult:
    record: DocumentRecord
    word_count: int
    summary: str


@dataclass(frozen=True)
class DocumentView:
    record: DocumentRecord
    word_count: int
    paragraphs: Iterable[str]
