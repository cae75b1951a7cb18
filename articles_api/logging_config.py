import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """
    Send application logs to stdout.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
    """
    logger = logging.getLogger("articles_api")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers so reloads do not duplicate lines
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
