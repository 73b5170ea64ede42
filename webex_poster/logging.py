import logging
import sys

from pythonjsonlogger import jsonlogger

from webex_poster.config import settings


def setup_logging(level: str | None = None) -> logging.Logger:
    logger = logging.getLogger()
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    handler = logging.StreamHandler(sys.stdout)
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.handlers = [handler]
    # request lines from httpx duplicate our own transport logging
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
