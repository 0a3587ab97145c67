# tests/test_loader.py
import pytest

from errors import LoadError
from loader import load_pdf, load_pdfs


class TestLoadPdf:
    def test_extracts_text_from_every_page(self, make_pdf):
        path = make_pdf("two_pages.pdf", "first page", "second page")
        text = load_pdf(path)
        assert text.split() == ["first", "page", "second", "page"]

    def test_blank_page_gives_no_words(self, make_pdf):
        assert load_pdf(make_pdf("blank.pdf", "")).split() == []

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.pdf"
        with pytest.raises(LoadError) as exc:
            load_pdf(missing)
        assert exc.value.path == missing

    def test_not_a_pdf(self, tmp_path):
        bogus = tmp_path / "bogus.pdf"
        bogus.write_bytes(b"this is not a pdf")
        with pytest.raises(LoadError, match="bogus.pdf"):
            load_pdf(bogus)


class TestLoadPdfs:
    def test_literal_path(self, make_pdf):
        path = make_pdf("one.pdf", "only file")
        [(loaded_path, text)] = list(load_pdfs(path))
        assert loaded_path == path
        assert text.split() == ["only", "file"]

    def test_glob_is_sorted(self, make_pdf, tmp_path):
        make_pdf("b.pdf", "bravo")
        make_pdf("a.pdf", "alpha")
        results = list(load_pdfs(str(tmp_path / "*.pdf")))
        assert [p.name for p, _ in results] == ["a.pdf", "b.pdf"]
        assert [t.split() for _, t in results] == [["alpha"], ["bravo"]]

    def test_glob_without_matches_yields_nothing(self, tmp_path):
        assert list(load_pdfs(str(tmp_path / "*.pdf"))) == []

    def test_missing_literal_path(self, tmp_path):
        with pytest.raises(LoadError, match="no such file"):
            list(load_pdfs(tmp_path / "missing.pdf"))

    def test_bad_file_in_glob_raises(self, make_pdf, tmp_path):
        make_pdf("a.pdf", "alpha")
        (tmp_path / "b.pdf").write_bytes(b"garbage")
        results = load_pdfs(str(tmp_path / "*.pdf"))
        assert next(results)[0].name == "a.pdf"
        with pytest.raises(LoadError) as exc:
            next(results)
        assert exc.value.path.name == "b.pdf"

    def test_single_character_and_class_wildcards(self, make_pdf, tmp_path):
        make_pdf("a.pdf", "alpha")
        make_pdf("b.pdf", "bravo")
        make_pdf("cc.pdf", "charlie")
        assert [p.name for p, _ in load_pdfs(str(tmp_path / "?.pdf"))] == ["a.pdf", "b.pdf"]
        assert [p.name for p, _ in load_pdfs(str(tmp_path / "[b]*.pdf"))] == ["b.pdf"]
