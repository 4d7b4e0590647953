"""Process-wide logging setup shared by the API server and uvicorn."""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a single stdout handler on the root and uvicorn loggers.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG"). Unknown names fall back to INFO.

    Returns:
        logging.Logger: The configured root logger.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers = [handler]

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        u_logger = logging.getLogger(name)
        u_logger.setLevel(numeric_level)
        u_logger.handlers = [handler]
        u_logger.propagate = False

    return root_logger
