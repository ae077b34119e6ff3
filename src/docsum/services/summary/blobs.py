from __future__ import annotations

from pathlib import Path

from docsum.services.summary.errors import DuplicateIDError, StorageFailedError

BLOB_SUFFIX = ".pdf"


class BlobStorage:
    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def path_for(self, doc_id: str) -> Path:
        return self._root / f"{doc_id}{BLOB_SUFFIX}"

    def write(self, doc_id: str, content: bytes) -> Path:
        path = self.path_for(doc_id)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageFailedError(f"Failed to create upload directory: {exc}") from exc

        try:
            with path.open("xb") as handle:
                handle.write(content)
        except FileExistsError as exc:
            raise DuplicateIDError(f"Blob already exists for document id: {doc_id}") from exc
        except OSError as exc:
            raise StorageFailedError(f"Failed to write file: {exc}") from exc
        return path

    def delete(self, doc_id: str) -> None:
        try:
            self.path_for(doc_id).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageFailedError(f"Failed to delete file: {exc}") from exc

    def exists(self, doc_id: str) -> bool:
        return self.path_for(doc_id).is_file()
