# tests/conftest.py
"""Shared fixtures: tiny PDFs written with PyPDF2 and deterministic fake embeddings."""
from pathlib import Path

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from PyPDF2 import PdfWriter
from PyPDF2.generic import DecodedStreamObject, DictionaryObject, NameObject


def write_pdf(path: Path, *page_texts: str) -> Path:
    """Write a PDF with one Helvetica text line per page; "" gives a blank page."""
    writer = PdfWriter()
    for text in page_texts or ("",):
        writer.add_blank_page(width=612, height=792)
        page = writer.pages[-1]
        if not text:
            continue
        font = DictionaryObject(
            {
                NameObject("/Type"): NameObject("/Font"),
                NameObject("/Subtype"): NameObject("/Type1"),
                NameObject("/BaseFont"): NameObject("/Helvetica"),
            }
        )
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font})}
        )
        stream = DecodedStreamObject()
        stream.set_data(f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1"))
        page[NameObject("/Contents")] = writer._add_object(stream)
    writer.write(str(path))
    return path


@pytest.fixture
def make_pdf(tmp_path):
    def _make(name: str, *page_texts: str) -> Path:
        return write_pdf(tmp_path / name, *page_texts)

    return _make


@pytest.fixture
def fake_embeddings():
    return DeterministicFakeEmbedding(size=32)
