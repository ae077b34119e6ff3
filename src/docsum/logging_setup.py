import logging

from pythonjsonlogger.json import JsonFormatter

from docsum.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Route the root logger through a single JSON stream handler."""
    logger = logging.getLogger()
    logger.setLevel(level or get_settings().log_level)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.handlers = [handler]
