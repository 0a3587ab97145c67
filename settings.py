# settings.py
"""
Startup configuration.

Defaults live as module constants; `Settings.from_env()` overlays the
environment (and a local .env file, if present).

    RAG_SOURCES          label=path/or/glob.pdf,other=docs/*.pdf
    RAG_CHUNK_SIZE       characters per passage
    RAG_TOP_K            passages retrieved per question
    RAG_EMBEDDING_MODEL  sentence-transformers model id
    RAG_CHAT_MODEL       seq2seq model id for the chat pipeline
    RAG_LOG_LEVEL        DEBUG / INFO / WARNING / ...
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from errors import ConfigError

DEFAULT_SOURCES = "moores_law=documents/01.pdf,last_question=documents/02.pdf"
DEFAULT_CHUNK_SIZE = 2000
DEFAULT_TOP_K = 4
EMB_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
CHAT_MODEL = "google/flan-t5-large"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Source:
    """A labelled PDF path or glob; the label prefixes passage ids."""

    label: str
    pattern: str


@dataclass(frozen=True)
class Settings:
    sources: tuple[Source, ...]
    chunk_size: int = DEFAULT_CHUNK_SIZE
    top_k: int = DEFAULT_TOP_K
    embedding_model: str = EMB_MODEL
    chat_model: str = CHAT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> "Settings":
        """Build settings from `env` (defaults to os.environ after loading .env)."""
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = dict(os.environ)

        log_level = env.get("RAG_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"RAG_LOG_LEVEL: unknown level {log_level!r}")

        return cls(
            sources=parse_sources(env.get("RAG_SOURCES", DEFAULT_SOURCES)),
            chunk_size=_positive_int(env, "RAG_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            top_k=_positive_int(env, "RAG_TOP_K", DEFAULT_TOP_K),
            embedding_model=env.get("RAG_EMBEDDING_MODEL", EMB_MODEL).strip() or EMB_MODEL,
            chat_model=env.get("RAG_CHAT_MODEL", CHAT_MODEL).strip() or CHAT_MODEL,
            log_level=log_level,
        )


def parse_sources(raw: str) -> tuple[Source, ...]:
    """
    Parse `label=pattern` entries separated by commas.
    A bare `pattern` takes the file stem as its label.
    """
    sources: list[Source] = []
    seen: set[str] = set()
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if "=" in entry:
            label, pattern = (part.strip() for part in entry.split("=", 1))
        else:
            label, pattern = Path(entry).stem, entry
        if not label or not pattern:
            raise ConfigError(f"RAG_SOURCES: malformed entry {entry!r}")
        if label in seen:
            raise ConfigError(f"RAG_SOURCES: duplicate label {label!r}")
        seen.add(label)
        sources.append(Source(label=label, pattern=pattern))

    if not sources:
        raise ConfigError("RAG_SOURCES: no sources configured")
    return tuple(sources)


def _positive_int(env: dict[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key}: expected an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"{key}: must be >= 1, got {value}")
    return value
