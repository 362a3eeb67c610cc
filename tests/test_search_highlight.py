"""Tests for lumina.core.search.search_highlight — per-item markup."""
from __future__ import annotations

from lumina.core.search import (
    HighlightRun,
    RunKind,
    SearchHighlight,
    SearchResult,
    classify_item,
    runs_to_html,
)

PLAIN = RunKind.PLAIN
MATCHED = RunKind.MATCHED
ACTIVE = RunKind.ACTIVE


class TestClassifyItem:
    def test_item_not_in_results_is_plain(self) -> None:
        runs = classify_item(1, 0, "find me", "find", frozenset({(2, 0)}), SearchResult(2, 0))
        assert runs == [HighlightRun("find me", PLAIN)]

    def test_empty_query_is_plain(self) -> None:
        runs = classify_item(1, 0, "find me", "", frozenset({(1, 0)}), None)
        assert runs == [HighlightRun("find me", PLAIN)]

    def test_matched_occurrences_keep_original_case(self) -> None:
        runs = classify_item(
            1, 0, "Find and FIND", "find", frozenset({(1, 0), (2, 0)}), SearchResult(2, 0)
        )
        assert runs == [
            HighlightRun("Find", MATCHED),
            HighlightRun(" and ", PLAIN),
            HighlightRun("FIND", MATCHED),
        ]

    def test_every_occurrence_in_current_item_is_active(self) -> None:
        runs = classify_item(
            3, 1, "a result, another result.", "result", frozenset({(3, 1)}), SearchResult(3, 1)
        )
        assert [run.kind for run in runs] == [PLAIN, ACTIVE, PLAIN, ACTIVE, PLAIN]
        assert "".join(run.text for run in runs) == "a result, another result."

    def test_regex_characters_in_query(self) -> None:
        runs = classify_item(1, 0, "total (net) and total", "(net)", frozenset({(1, 0)}), None)
        assert runs == [
            HighlightRun("total ", PLAIN),
            HighlightRun("(net)", MATCHED),
            HighlightRun(" and total", PLAIN),
        ]

    def test_whole_text_match(self) -> None:
        runs = classify_item(1, 0, "exact", "EXACT", frozenset({(1, 0)}), SearchResult(1, 0))
        assert runs == [HighlightRun("exact", ACTIVE)]


class TestRunsToHtml:
    def test_escapes_and_wraps_matches(self) -> None:
        markup = runs_to_html(
            [
                HighlightRun("<b>", PLAIN),
                HighlightRun("x&y", MATCHED),
                HighlightRun("z", ACTIVE),
            ],
            match_color="#111111",
            active_color="#222222",
        )
        assert markup.startswith("&lt;b&gt;")
        assert '<span class="search-match" style="background-color: #111111;">x&amp;y</span>' in markup
        assert '<span class="search-match-active" style="background-color: #222222;">z</span>' in markup

    def test_plain_runs_have_no_markup(self) -> None:
        assert runs_to_html([HighlightRun("just text")]) == "just text"


class TestSearchHighlight:
    def _highlight(self) -> SearchHighlight:
        results = [SearchResult(1, 0), SearchResult(1, 2), SearchResult(3, 0)]
        return SearchHighlight("term", results, current=SearchResult(1, 2), generation=4)

    def test_render_uses_snapshot_state(self) -> None:
        highlight = self._highlight()
        assert highlight.render(1, 1, "term") == [HighlightRun("term", PLAIN)]
        assert highlight.render(1, 0, "term") == [HighlightRun("term", MATCHED)]
        assert highlight.render(1, 2, "term") == [HighlightRun("term", ACTIVE)]

    def test_is_result_and_staleness(self) -> None:
        highlight = self._highlight()
        assert highlight.is_result(3, 0)
        assert not highlight.is_result(2, 0)
        assert not highlight.is_stale(4)
        assert highlight.is_stale(5)

    def test_highlights_for_page(self) -> None:
        highlight = self._highlight()
        assert highlight.get_highlights_for_page(1) == ([0, 2], 1)
        assert highlight.get_highlights_for_page(3) == ([0], -1)
        assert highlight.get_highlights_for_page(2) == ([], -1)

    def test_default_snapshot_renders_plain(self) -> None:
        assert SearchHighlight().render_html(1, 0, "a < b") == "a &lt; b"
