from dataclasses import dataclass
from functools import lru_cache
import os


def _to_int(value: str | None, *, default: int, minimum: int) -> int:
    if value is None:
        return default
    parsed = int(value)
    return max(minimum, parsed)


@dataclass(frozen=True)
class Settings:
    upload_dir: str
    summary_length: int
    min_word_length: int
    log_level: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    return Settings(
        upload_dir=os.getenv("DOCSUM_UPLOAD_DIR", "uploads"),
        summary_length=_to_int(os.getenv("DOCSUM_SUMMARY_LENGTH"), default=20, minimum=1),
        min_word_length=_to_int(os.getenv("DOCSUM_MIN_WORD_LENGTH"), default=4, minimum=1),
        log_level=os.getenv("DOCSUM_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("DOCSUM_HOST", "127.0.0.1"),
        port=_to_int(os.getenv("DOCSUM_PORT"), default=3000, minimum=1),
    )
