from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends, FastAPI, File, HTTPException, Query, UploadFile
from pydantic import BaseModel, ConfigDict

from docsum.config import get_settings
from docsum.logging_setup import configure_logging
from docsum.services.summary import (
    BlobStorage,
    DocumentError,
    DocumentRecord,
    DocumentService,
    InvalidInputError,
    NotFoundError,
    PypdfTextExtractor,
    SummaryOptions,
)


class ApiResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    success: bool
    message: str
    data: dict[str, Any] | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    yield


app = FastAPI(title="PDF Keyword Summarizer", version="0.1.0", lifespan=lifespan)


@lru_cache
def get_document_service() -> DocumentService:
    settings = get_settings()
    return DocumentService(
        blobs=BlobStorage(Path(settings.upload_dir)),
        extractor=PypdfTextExtractor(),
        ingest_options=SummaryOptions(
            length=settings.summary_length,
            min_word_length=settings.min_word_length,
            exclude_common=True,
        ),
    )


ServiceDep = Annotated[DocumentService, Depends(get_document_service)]


def _http_error(exc: DocumentError) -> HTTPException:
    if isinstance(exc, InvalidInputError):
        status_code = 400
    elif isinstance(exc, NotFoundError):
        status_code = 404
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=str(exc))


def _record_payload(record: DocumentRecord) -> dict[str, Any]:
    return asdict(record)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/upload", status_code=201, response_model_exclude_none=True)
def upload(service: ServiceDep, file: UploadFile | None = File(default=None)) -> ApiResponse:
    if file is None:
        raise _http_error(InvalidInputError("No file was uploaded"))

    try:
        record = service.ingest(file.filename, file.file.read())
    except DocumentError as exc:
        raise _http_error(exc) from exc

    return ApiResponse(success=True, message="Document processed", data=_record_payload(record))


@app.get("/history")
def history(service: ServiceDep) -> list[dict[str, Any]]:
    return [_record_payload(record) for record in service.list()]


@app.get("/api/summary/{doc_id}", response_model_exclude_none=True)
def get_summary(
    doc_id: str,
    service: ServiceDep,
    length: int | None = Query(default=None, ge=0),
    min_word_length: int | None = Query(default=None, ge=0),
    exclude_common: bool = Query(default=False),
) -> ApiResponse:
    defaults = SummaryOptions()
    options = SummaryOptions(
        length=defaults.length if length is None else length,
        min_word_length=defaults.min_word_length if min_word_length is None else min_word_length,
        exclude_common=exclude_common,
    )

    try:
        result = service.retrieve(doc_id, options)
    except DocumentError as exc:
        raise _http_error(exc) from exc

    return ApiResponse(
        success=True,
        message="Summary generated",
        data={
            "id": result.record.id,
            "filename": result.record.filename,
            "timestamp": result.record.timestamp,
            "word_count": result.word_count,
            "summary": result.summary,
        },
    )


@app.get("/view/{doc_id}")
def view_document(doc_id: str, service: ServiceDep) -> dict[str, Any]:
    try:
        view = service.view_full_text(doc_id)
    except DocumentError as exc:
        raise _http_error(exc) from exc

    return {
        **_record_payload(view.record),
        "word_count": view.word_count,
        "paragraphs": list(view.paragraphs),
    }


@app.post("/delete/{doc_id}", response_model_exclude_none=True)
def delete_document(doc_id: str, service: ServiceDep) -> ApiResponse:
    try:
        service.delete(doc_id)
    except DocumentError as exc:
        raise _http_error(exc) from exc

    return ApiResponse(success=True, message="Document deleted successfully")


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("docsum.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
