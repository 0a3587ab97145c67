# log.py
"""
One place to configure logging for every module.

    from log import get_logger
    logger = get_logger(__name__)

Messages are prefixed with a subsystem tag so output stays greppable.
"""
import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s — %(message)s"

INGEST = "[INGEST]"
CHUNKING = "[CHUNKING]"
EMBEDDING = "[EMBEDDING]"
VECTOR_DB = "[VECTOR_DB]"
CHAT = "[CHAT]"
CLI = "[CLI]"


def configure_logging(level: int | str = logging.INFO, fmt: str = DEFAULT_FORMAT, stream=sys.stderr) -> None:
    """
    Attach a single stream handler to the root logger and set its level.
    Calling it again only changes the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
