# errors.py
"""
Error taxonomy for the PDF chat demo.

Ingestion-time errors (load, chunk, embed) abort the run.
AgentError is scoped to a single chat turn.
"""
from pathlib import Path


class RagError(Exception):
    """Base class for every error raised by this project."""


class ConfigError(RagError):
    """Invalid or missing configuration value."""


class LoadError(RagError):
    """A source file could not be read or parsed."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Could not load {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class NoContentExtracted(RagError):
    """Chunking produced zero passages for a source."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"No content found in PDF file: {source}")


class IngestionError(RagError):
    """Contextual wrapper naming the source whose ingestion failed."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(message)


class EmbeddingServiceError(RagError):
    """The embedding batch failed; no partial index is kept."""


class AgentError(RagError):
    """A chat turn failed, or the chat model could not be loaded."""
