# loader.py
import glob
from pathlib import Path
from typing import Iterator

from PyPDF2 import PdfReader
from PyPDF2.errors import PyPdfError

from errors import LoadError
from log import INGEST, get_logger

logger = get_logger(__name__)

GLOB_CHARS = "*?["


def load_pdf(path: str | Path) -> str:
    """
    Reads a PDF file and returns its text as a single string.
    Non‑text pages (scans) contribute nothing.
    """
    try:
        reader = PdfReader(str(path))
        return "\n".join(
            page.extract_text() or ""   # extract_text may return None
            for page in reader.pages
        )
    except (OSError, PyPdfError) as e:
        raise LoadError(path, str(e)) from e


def load_pdfs(glob_or_path: str | Path) -> Iterator[tuple[Path, str]]:
    """
    Yields (path, text) for every PDF matching a literal path or glob,
    in sorted path order. The first unreadable file raises LoadError.
    """
    pattern = str(glob_or_path)
    if any(c in pattern for c in GLOB_CHARS):
        paths = [Path(p) for p in sorted(glob.glob(pattern, recursive=True))]
    else:
        paths = [Path(pattern)]

    for path in paths:
        if not path.is_file():
            raise LoadError(path, "no such file")
        logger.debug(f"{INGEST} Reading {path}")
        yield path, load_pdf(path)
