"""Tests for lumina.core.store — document list and current document."""
from __future__ import annotations

import os

import pytest

from lumina.core.search import SearchOutcome
from lumina.core.store import ViewerStore


class TestViewerStore:
    def test_add_document(self, tmp_path) -> None:
        store = ViewerStore()
        path = tmp_path / "report.pdf"
        document = store.add_document(str(path))

        assert document.name == "report.pdf"
        assert document.path == os.path.abspath(str(path))
        assert store.documents == [document]

    def test_adding_same_path_returns_existing(self, tmp_path) -> None:
        store = ViewerStore()
        first = store.add_document(str(tmp_path / "a.pdf"))
        second = store.add_document(str(tmp_path / "a.pdf"))

        assert first is second
        assert len(store.documents) == 1

    def test_distinct_paths_get_distinct_ids(self, tmp_path) -> None:
        store = ViewerStore()
        a = store.add_document(str(tmp_path / "a.pdf"))
        b = store.add_document(str(tmp_path / "b.pdf"))
        assert a.id != b.id

    @pytest.mark.asyncio
    async def test_switching_document_resets_search(self, tmp_path, make_extractor) -> None:
        store = ViewerStore()
        a = store.add_document(str(tmp_path / "a.pdf"))
        b = store.add_document(str(tmp_path / "b.pdf"))

        generation = store.set_current_document(a)
        assert store.session.apply_corpus(generation, await _corpus(make_extractor))
        store.session.execute_search("page")
        assert store.session.results

        new_generation = store.set_current_document(b)

        assert new_generation == generation + 1
        assert store.current_document == b
        assert store.session.results == []
        assert store.session.document_id == b.id
        assert store.session.execute_search("page").outcome is SearchOutcome.INDEXING

    def test_clearing_current_document(self, tmp_path) -> None:
        store = ViewerStore()
        a = store.add_document(str(tmp_path / "a.pdf"))
        store.set_current_document(a)

        assert store.set_current_document(None) is None
        assert store.current_document is None
        assert not store.session.is_indexing

    def test_remove_current_document(self, tmp_path) -> None:
        store = ViewerStore()
        a = store.add_document(str(tmp_path / "a.pdf"))
        store.set_current_document(a)

        assert store.remove_document(a.id)
        assert store.documents == []
        assert store.current_document is None
        assert not store.remove_document(a.id)

    def test_listeners_notified(self, tmp_path) -> None:
        store = ViewerStore()
        calls: list[int] = []
        unsubscribe = store.subscribe(lambda s: calls.append(len(s.documents)))

        a = store.add_document(str(tmp_path / "a.pdf"))
        store.set_current_document(a)
        unsubscribe()
        store.add_document(str(tmp_path / "b.pdf"))

        assert calls == [1, 1]


async def _corpus(make_extractor):
    from lumina.core.search import build_corpus

    return await build_corpus(1, make_extractor([["a page of text"]]))
