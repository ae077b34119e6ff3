from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docsum.config import get_settings
from docsum.main import app, get_document_service
from docsum.services.summary import BlobStorage, DocumentService, ExtractionFailedError

BROKEN_PDF = b"%PDF-broken"


def build_pdf(content: bytes, *, stream_filter: str | None = None) -> bytes:
    filter_entry = f" /Filter /{stream_filter}" if stream_filter else ""
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 200] /Resources << >> /Contents 4 0 R >>",
        f"<< /Length {len(content)}{filter_entry} >>\nstream\n".encode() + content + b"\nendstream",
    ]

    pdf = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(pdf))
        pdf += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(pdf)
    pdf += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode()
    for offset in offsets:
        pdf += f"{offset:010d} 00000 n \n".encode()
    pdf += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(pdf)


class FakeTextExtractor:
    def __init__(self) -> None:
        self.calls = 0

    def extract_text(self, path: Path) -> str:
        self.calls += 1
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ExtractionFailedError(str(exc)) from exc
        if data.startswith(BROKEN_PDF):
            raise ExtractionFailedError("Failed to extract text: broken xref table")
        return data.decode("utf-8")


@pytest.fixture(autouse=True)
def reset_caches() -> Iterator[None]:
    get_settings.cache_clear()
    get_document_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_document_service.cache_clear()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def service(upload_dir: Path) -> DocumentService:
    return DocumentService(blobs=BlobStorage(upload_dir), extractor=FakeTextExtractor())


@pytest.fixture
def client(
    monkeypatch: pytest.MonkeyPatch,
    upload_dir: Path,
    service: DocumentService,
) -> Iterator[TestClient]:
    monkeypatch.setenv("DOCSUM_UPLOAD_DIR", str(upload_dir))

    app.dependency_overrides[get_document_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
