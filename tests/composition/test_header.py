"""
Header Composer Tests
=====================

One title per response shape, bounded by the header truncation policy.
"""

import pytest

from sstviewer.composition.header import chapter_title, compose_header
from sstviewer.state import (
    BrowseEntry, BrowseResponse, ConeResponse, ConeResult, NeighborhoodResponse,
    NodeRef, PageResponse, PageView, QueryMode, QueryRequest, SequenceResponse,
    TOCEntry, TOCResponse,
)
from tests.fixtures import make_event, make_story


def cone_result(title: str) -> ConeResult:
    return ConeResult(
        title=title, identity=NodeRef(1, 1), entire_path=(),
        betweenness_ranking=(), supernodes=(),
    )


class TestTitleSources:

    def test_neighborhood_prefers_title(self):
        response = NeighborhoodResponse(
            request=QueryRequest(),
            events=(make_event(text="body text", title="The Title"),),
        )

        assert compose_header(response) == "The Title"

    def test_neighborhood_falls_back_to_text(self):
        response = NeighborhoodResponse(request=QueryRequest(), events=(make_event(text="body"),))

        assert compose_header(response) == "body"

    def test_cone_uses_first_result(self):
        response = ConeResponse(
            request=QueryRequest(mode=QueryMode.CONE),
            paths=(cone_result("first"), cone_result("second")),
        )

        assert compose_header(response) == "first"

    def test_browse_uses_first_entry(self):
        entry = BrowseEntry(title="browsed", identity=NodeRef(1, 1), paths_per_category=())
        response = BrowseResponse(request=QueryRequest(mode=QueryMode.BROWSE), nptrs=(entry,))

        assert compose_header(response) == "browsed"

    def test_sequence_uses_first_story(self):
        response = SequenceResponse(
            request=QueryRequest(mode=QueryMode.SEQUENCE),
            stories=(make_story(text="tale"),),
        )

        assert compose_header(response) == "tale"

    def test_toc_uses_request_chapter(self):
        request = QueryRequest(mode=QueryMode.TOC, chapter="C1", context="x")
        response = TOCResponse(request=request, entries=(TOCEntry("C1", ("x",)),))

        assert compose_header(response) == "C1 :: x ::"

    def test_page_uses_page_title(self):
        response = PageResponse(
            request=QueryRequest(mode=QueryMode.PAGE),
            page=PageView(title="notes", context="ctx"),
        )

        assert compose_header(response) == chapter_title("notes", "ctx")


class TestDefaults:

    @pytest.mark.parametrize("response", [
        NeighborhoodResponse(request=QueryRequest()),
        ConeResponse(request=QueryRequest(mode=QueryMode.CONE)),
        BrowseResponse(request=QueryRequest(mode=QueryMode.BROWSE)),
        SequenceResponse(request=QueryRequest(mode=QueryMode.SEQUENCE)),
    ])
    def test_empty_response_uses_default_title(self, response):
        assert compose_header(response) == "app"
        assert compose_header(response, default_title="notes") == "notes"

    def test_long_title_is_truncated(self):
        response = NeighborhoodResponse(request=QueryRequest(), events=(make_event(text="w" * 80),))

        title = compose_header(response)

        assert title == "w" * 57 + "..."

    def test_unknown_response_type_is_rejected(self):
        with pytest.raises(TypeError):
            compose_header(object())
