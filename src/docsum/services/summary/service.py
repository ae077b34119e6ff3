from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import logging
import uuid

from docsum.services.summary.blobs import BLOB_SUFFIX, BlobStorage
from docsum.services.summary.errors import (
    DuplicateIDError,
    ExtractionFailedError,
    InvalidInputError,
    NotFoundError,
    StorageFailedError,
)
from docsum.services.summary.extractor import TextExtractor
from docsum.services.summary.store import DocumentStore
from docsum.services.summary.tokenizer import Paragraphs, count_words, summarize
from docsum.services.summary.types import (
    DocumentRecord,
    DocumentView,
    SummaryOptions,
    SummaryResult,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class DocumentService:
    """Ingests PDF uploads and serves the in-memory document history.

    A record is registered only after its blob is on disk and its text was
    extracted; every failure after the blob write removes the blob again.
    """

    def __init__(
        self,
        *,
        blobs: BlobStorage,
        extractor: TextExtractor,
        store: DocumentStore | None = None,
        ingest_options: SummaryOptions | None = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._blobs = blobs
        self._extractor = extractor
        self._store = store if store is not None else DocumentStore()
        self._ingest_options = ingest_options or SummaryOptions(exclude_common=True)
        self._id_factory = id_factory
        self._clock = clock

    @property
    def store(self) -> DocumentStore:
        return self._store

    def ingest(self, filename: str | None, content: bytes | None) -> DocumentRecord:
        if content is None:
            raise InvalidInputError("No file was uploaded")
        if not filename:
            raise InvalidInputError("No filename provided")
        if not filename.lower().endswith(BLOB_SUFFIX):
            log.warning("rejected upload with unsupported extension", extra={"upload_filename": filename})
            raise InvalidInputError("Only PDF files are accepted")
        if not content:
            raise InvalidInputError("Empty file")

        doc_id = self._id_factory()
        path = self._blobs.write(doc_id, content)

        try:
            text = self._extractor.extract_text(path)
        except ExtractionFailedError:
            log.warning("text extraction failed", extra={"doc_id": doc_id, "upload_filename": filename})
            self._discard_blob(doc_id)
            raise
        except Exception as exc:
            log.warning("text extraction crashed", extra={"doc_id": doc_id, "upload_filename": filename})
            self._discard_blob(doc_id)
            raise ExtractionFailedError(f"Failed to extract text: {exc}") from exc

        record = DocumentRecord(
            id=doc_id,
            filename=filename,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            word_count=count_words(text),
            summary=summarize(text, self._ingest_options),
        )

        try:
            self._store.insert(record)
        except DuplicateIDError:
            self._discard_blob(doc_id)
            raise

        log.info(
            "document ingested",
            extra={"doc_id": doc_id, "upload_filename": filename, "word_count": record.word_count},
        )
        return record

    def list(self) -> list[DocumentRecord]:
        return self._store.list()

    def retrieve(self, doc_id: str, options: SummaryOptions | None = None) -> SummaryResult:
        record, text = self._load_text(doc_id)
        return SummaryResult(
            record=record,
            word_count=count_words(text),
            summary=summarize(text, options or SummaryOptions()),
        )

    def view_full_text(self, doc_id: str) -> DocumentView:
        record, text = self._load_text(doc_id)
        return DocumentView(
            record=record,
            word_count=count_words(text),
            paragraphs=Paragraphs(text),
        )

    def delete(self, doc_id: str) -> None:
        entry = self._store.pop_entry(doc_id)
        if entry is None:
            raise NotFoundError("Document not found")

        try:
            self._blobs.delete(doc_id)
        except StorageFailedError:
            self._store.reinstate(entry)
            raise

        log.info("document deleted", extra={"doc_id": doc_id})

    def _load_text(self, doc_id: str) -> tuple[DocumentRecord, str]:
        record = self._store.get(doc_id)
        if record is None:
            raise NotFoundError("Document not found")
        if not self._blobs.exists(doc_id):
            raise NotFoundError("PDF file not found")

        try:
            text = self._extractor.extract_text(self._blobs.path_for(doc_id))
        except ExtractionFailedError as exc:
            if doc_id not in self._store or not self._blobs.exists(doc_id):
                raise NotFoundError("Document not found") from exc
            raise

        return record, text

    def _discard_blob(self, doc_id: str) -> None:
        try:
            self._blobs.delete(doc_id)
        except StorageFailedError:
            log.exception("failed to remove blob after aborted ingest", extra={"doc_id": doc_id})
