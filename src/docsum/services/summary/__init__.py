from docsum.services.summary.blobs import BlobStorage
from docsum.services.summary.errors import (
    DocumentError,
    DuplicateIDError,
    ExtractionFailedError,
    InvalidInputError,
    NotFoundError,
    StorageFailedError,
)
from docsum.services.summary.extractor import PypdfTextExtractor, TextExtractor
from docsum.services.summary.service import DocumentService
from docsum.services.summary.store import DocumentStore
from docsum.services.summary.tokenizer import summarize
from docsum.services.summary.types import DocumentRecord, DocumentView, SummaryOptions, SummaryResult

__all__ = [
    "BlobStorage",
    "DocumentError",
    "DocumentRecord",
    "DocumentService",
    "DocumentStore",
    "DocumentView",
    "DuplicateIDError",
    "ExtractionFailedError",
    "InvalidInputError",
    "NotFoundError",
    "PypdfTextExtractor",
    "StorageFailedError",
    "SummaryOptions",
    "SummaryResult",
    "TextExtractor",
    "summarize",
]
