from __future__ import annotations

import asyncio
from typing import Callable, Iterable, Optional, Sequence

import pytest

from lumina.core.errors import PageExtractionError
from lumina.core.search import Corpus, TextItem


class FakeExtractor:
    """In-memory page text source with optional failures and a gate."""

    def __init__(
        self,
        pages: Sequence[Sequence[str]],
        failing: Iterable[int] = (),
        crashing: Iterable[int] = (),
        malformed: Iterable[int] = (),
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.pages = [list(p) for p in pages]
        self.failing = set(failing)
        self.crashing = set(crashing)
        self.malformed = set(malformed)
        self.gate = gate
        self.requested: list[int] = []

    async def get_page_text(self, page_number: int) -> list[dict[str, str]]:
        self.requested.append(page_number)
        if self.gate is not None:
            await self.gate.wait()
        if page_number in self.failing:
            raise PageExtractionError(page_number, "malformed page")
        if page_number in self.crashing:
            raise RuntimeError("renderer crashed")
        if page_number in self.malformed:
            return None  # type: ignore[return-value]
        return [{"text": text} for text in self.pages[page_number - 1]]


def corpus_from(pages: Sequence[Sequence[str]]) -> Corpus:
    return Corpus(
        tuple(
            tuple(TextItem(page=p + 1, item_index=i, text=t) for i, t in enumerate(items))
            for p, items in enumerate(pages)
        )
    )


SCENARIO_PAGES = [
    ["This is a test page."],
    ["Another page with searchable text here."],
]


@pytest.fixture
def make_extractor() -> Callable[..., FakeExtractor]:
    return FakeExtractor


@pytest.fixture
def make_corpus() -> Callable[[Sequence[Sequence[str]]], Corpus]:
    return corpus_from


@pytest.fixture
def scenario_corpus() -> Corpus:
    return corpus_from(SCENARIO_PAGES)
