from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pypdf import PdfReader

from docsum.services.summary.errors import ExtractionFailedError


class TextExtractor(Protocol):
    def extract_text(self, path: Path) -> str: ...


class PypdfTextExtractor:
    def __init__(self, *, page_separator: str = "\n") -> None:
        self._page_separator = page_separator

    def extract_text(self, path: Path) -> str:
        try:
            reader = PdfReader(str(path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as exc:
            raise ExtractionFailedError(f"Failed to extract text: {exc}") from exc

        return self._page_separator.join(pages)
