# chunker.py
"""
Fixed-size, word-aligned chunking of extracted PDF text.

Words are packed greedily into passages of at most `chunk_size`
characters (words joined by single spaces). A word is never split, so a
word longer than `chunk_size` becomes a passage of its own.
"""
from dataclasses import dataclass, field
from typing import Iterable

from errors import NoContentExtracted
from log import CHUNKING, get_logger
from settings import DEFAULT_CHUNK_SIZE

logger = get_logger(__name__)


@dataclass(frozen=True)
class Passage:
    """Unit of embedding and retrieval; `id` is `<source_label>_<index>`."""

    id: str
    content: str


@dataclass
class _Accumulator:
    words: list[str] = field(default_factory=list)
    length: int = 0  # len(" ".join(words))

    def fits(self, word: str, limit: int) -> bool:
        return not self.words or self.length + 1 + len(word) <= limit

    def add(self, word: str) -> None:
        self.length += len(word) + (1 if self.words else 0)
        self.words.append(word)

    def flush(self) -> str:
        passage = " ".join(self.words)
        self.words = []
        self.length = 0
        return passage


def chunk_texts(
    texts: Iterable[str],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    source: str = "<text>",
) -> list[str]:
    """
    Split the text blobs of one source into ordered passages.

    The accumulator carries over from one blob to the next, so a passage
    may span a file boundary within the same source. Raises
    NoContentExtracted when no words are found at all.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    passages: list[str] = []
    acc = _Accumulator()
    for text in texts:
        for word in text.split():
            if not acc.fits(word, chunk_size):
                passages.append(acc.flush())
            acc.add(word)
    if acc.words:
        passages.append(acc.flush())

    if not passages:
        raise NoContentExtracted(source)

    logger.debug(f"{CHUNKING} {source}: {len(passages)} passages (chunk_size={chunk_size})")
    return passages


def assign_ids(label: str, contents: Iterable[str]) -> list[Passage]:
    return [Passage(id=f"{label}_{i}", content=c) for i, c in enumerate(contents)]
