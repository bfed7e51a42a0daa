import logging as py_logging
from typing import Optional

from bucketmanager.errors import ConfigurationError

PACKAGE_LOGGER_NAME = "bucketmanager"


def build_file_handler(filename: str):
    """
    Build a file handler with a default formatter, saving to the given filename.
    """
    file_handler = py_logging.FileHandler(filename)
    formatter = py_logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(filename)s:%(lineno)d - %(message)s"
    )
    file_handler.setFormatter(formatter)

    return file_handler


def configure_logging(filename: Optional[str], level: str = "INFO") -> Optional[py_logging.Handler]:
    """
    Attach a file handler to the package logger if a log file is configured.

    Returns the handler that was added, or None; pass it to `remove_logging` when done.
    :raises ConfigurationError: if the file cannot be opened or the level is unknown.
    """
    if not filename:
        return None

    try:
        handler = build_file_handler(filename)
    except OSError as e:
        raise ConfigurationError(f"Cannot open log file: {filename}\n{e}") from e

    try:
        handler.setLevel(level)
    except (TypeError, ValueError) as e:
        handler.close()
        raise ConfigurationError(f"Invalid log level for {filename}\n{e}") from e

    package_logger = py_logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def remove_logging(handler: Optional[py_logging.Handler]) -> None:
    """
    Detach and close a handler added by `configure_logging`.
    """
    if handler is None:
        return

    package_logger = py_logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.removeHandler(handler)
    package_logger.setLevel(py_logging.NOTSET)
    handler.close()
