"""Tests for lumina.core.document.pdf_reader against real PDFs."""
from __future__ import annotations

import fitz
import pytest

from lumina.core.document import PDFDocumentReader, document_id_for_path
from lumina.core.errors import DocumentLoadError, PageExtractionError
from lumina.core.search import SearchResult, SearchSession, build_corpus


def _write_pdf(path, pages: list[list[str]]) -> str:
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        for n, line in enumerate(lines):
            page.insert_text((72, 72 + 40 * n), line, fontsize=12)
    doc.save(str(path))
    doc.close()
    return str(path)


@pytest.fixture
def scenario_pdf(tmp_path) -> str:
    return _write_pdf(
        tmp_path / "scenario.pdf",
        [["This is a test page."], ["Another page with searchable text here."]],
    )


class TestLoading:
    def test_load_pdf(self, scenario_pdf) -> None:
        reader = PDFDocumentReader()
        assert reader.load_pdf(scenario_pdf) == 2
        assert reader.doc is not None
        assert reader.get_page_count() == 2
        assert reader.current_file_path == scenario_pdf
        assert reader.document_id == document_id_for_path(scenario_pdf)

        reader.close_document()
        assert reader.doc is None
        assert reader.get_page_count() == 0

    def test_load_garbage_raises(self, tmp_path) -> None:
        bogus = tmp_path / "bogus.pdf"
        bogus.write_bytes(b"this is not a pdf")
        with pytest.raises(DocumentLoadError):
            PDFDocumentReader().load_pdf(str(bogus))

    def test_load_bytes(self, scenario_pdf) -> None:
        with open(scenario_pdf, "rb") as f:
            data = f.read()
        reader = PDFDocumentReader()
        assert reader.load_bytes(data, "upload.pdf") == 2
        assert reader.current_file_path == "upload.pdf"


class TestPageText:
    @pytest.mark.asyncio
    async def test_lines_become_items(self, tmp_path) -> None:
        path = _write_pdf(tmp_path / "lines.pdf", [["First line", "Second line"]])
        reader = PDFDocumentReader()
        reader.load_pdf(path)

        items = await reader.get_page_text(1)

        assert [item["text"].strip() for item in items] == ["First line", "Second line"]

    @pytest.mark.asyncio
    async def test_out_of_range_page(self, scenario_pdf) -> None:
        reader = PDFDocumentReader()
        reader.load_pdf(scenario_pdf)
        with pytest.raises(PageExtractionError):
            await reader.get_page_text(3)
        with pytest.raises(PageExtractionError):
            await reader.get_page_text(0)

    @pytest.mark.asyncio
    async def test_no_document(self) -> None:
        with pytest.raises(PageExtractionError):
            await PDFDocumentReader().get_page_text(1)


class TestEndToEnd:
    @pytest.mark.asyncio
    async def test_search_real_pdf(self, scenario_pdf) -> None:
        reader = PDFDocumentReader()
        page_count = reader.load_pdf(scenario_pdf)
        session = SearchSession()

        assert await session.load_document(reader.document_id, page_count, reader)
        status = session.execute_search("SEARCHABLE text")

        assert session.results == [SearchResult(page=2, item_index=0)]
        assert status.message == "1 result(s) found."
        assert status.position_label == "1 of 1"

    @pytest.mark.asyncio
    async def test_corpus_from_real_pdf(self, scenario_pdf) -> None:
        reader = PDFDocumentReader()
        reader.load_pdf(scenario_pdf)
        corpus = await build_corpus(reader.get_page_count(), reader)

        assert corpus.page_count == 2
        assert "test page" in corpus.page_items(1)[0].text
