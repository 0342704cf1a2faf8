"""
View Composer Tests
===================

Full documents per query mode.

TEST CATEGORIES:
================
1. Sequence - story lists vs a single story's axis
2. Table of contents - chapter headings and context entries
3. Cone - title, paths, ranking table
4. Browse - fixed category order, trailing rule
5. Neighborhood - one fragment and rule per event
6. Fallback - shared "no results" document
"""

import pytest

from sstviewer.composition import ViewComposer
from sstviewer.composition.views import FALLBACK_MESSAGES
from sstviewer.presentation import (
    ChapterActivation, Group, HeadingLevel, Link, ListBlock, NodeActivation,
    Separator, Table, Text, TextStyle,
)
from sstviewer.state import (
    BrowseEntry, BrowseResponse, ConeResponse, ConeResult, NeighborhoodResponse,
    NodeRef, PageResponse, PageView, QueryMode, QueryRequest, RelationCategory,
    SequenceResponse, TOCEntry, TOCResponse,
)
from tests.fixtures import arrow, make_event, make_relation, make_story, node


@pytest.fixture
def composer():
    return ViewComposer()


def node_groups(body: Group):
    return [b for b in body.children if isinstance(b, Group) and b.role == "node"]


# =============================================================================
# SEQUENCE
# =============================================================================

class TestSequenceView:

    def test_several_stories_list_numbered_titles(self, composer):
        story_a = make_story(text="storyA", arrow_context="contains", container=NodeRef(1, 10))
        story_b = make_story(text="storyB", arrow_context="contains", container=NodeRef(2, 20))
        response = SequenceResponse(
            request=QueryRequest(mode=QueryMode.SEQUENCE),
            stories=(story_a, story_b),
        )

        body = composer.sequence(response)

        titles = [b for b in body.children if isinstance(b, Link)]
        assert [t.content.text for t in titles] == ["1. storyA", "2. storyB"]
        assert titles[0].activation == NodeActivation(NodeRef(1, 10))
        assert titles[1].activation == NodeActivation(NodeRef(2, 20))
        assert sum(isinstance(b, Separator) for b in body.children) == 2

    def test_story_without_container_is_not_linked(self, composer):
        response = SequenceResponse(
            request=QueryRequest(mode=QueryMode.SEQUENCE),
            stories=(make_story(text="a"), make_story(text="b")),
        )

        body = composer.sequence(response)

        assert body.children[0] == Text("1. a", style=TextStyle.HEADING, level=HeadingLevel.H1)
        assert body.children[1] == Text(" in contains", style=TextStyle.CONTEXT)

    def test_single_story_renders_its_axis(self, composer):
        n1 = make_event(text="n1", relations={
            RelationCategory.LEADS_TO: [
                make_relation(label="then", text="n2"),
                make_relation(label="leads to", text="elsewhere"),
            ],
            RelationCategory.CONTAINED_BY: [
                make_relation(label="is in", category=RelationCategory.CONTAINED_BY, text="box"),
            ],
        })
        n2 = make_event(text="n2")
        story = make_story(text="storyA", arrow_context="then", axis=[n1, n2])
        response = SequenceResponse(request=QueryRequest(mode=QueryMode.SEQUENCE), stories=(story,))

        body = composer.sequence(response)

        assert body.children[0] == Text("storyA", style=TextStyle.HEADING, level=HeadingLevel.H1)
        assert sum(1 for b in body.children if isinstance(b, Text) and b.text == "storyA") == 1

        first, second = node_groups(body)
        assert first.children[0].content.text == "1. n1"
        assert second.children[0].content.text == "2. n2"
        assert first.children[0].content.level is HeadingLevel.BODY

        relations = [b for b in first.children if isinstance(b, Group)]
        assert len(relations) == 1
        assert relations[0].children[0].text == "( leads to )"

    def test_no_stories_gives_empty_body(self, composer):
        body = composer.sequence(SequenceResponse(request=QueryRequest(mode=QueryMode.SEQUENCE)))

        assert len(body) == 0


# =============================================================================
# TABLE OF CONTENTS
# =============================================================================

class TestTableOfContentsView:

    def test_chapter_with_contexts(self, composer):
        response = TOCResponse(
            request=QueryRequest(mode=QueryMode.TOC),
            entries=(TOCEntry(chapter="C1", contexts=("x", "y")),),
        )

        body = composer.table_of_contents(response)

        heading, panel, rule = body.children
        assert heading.content.text == "C1"
        assert heading.content.level is HeadingLevel.H1
        assert heading.activation == ChapterActivation("C1", "")
        assert [link.content.text for link in panel.children] == ["x", "y"]
        assert [link.activation for link in panel.children] == [
            ChapterActivation("C1", "x"),
            ChapterActivation("C1", "y"),
        ]
        assert isinstance(rule, Separator)

    def test_context_activation_browses_chapter(self):
        request = ChapterActivation("C1", "x").to_request()

        assert request.mode is QueryMode.BROWSE
        assert (request.chapter, request.context) == ("C1", "x")


# =============================================================================
# CONE
# =============================================================================

class TestConeView:

    def test_cone_block_layout(self, composer):
        result = ConeResult(
            title="hub",
            identity=NodeRef(3, 3),
            entire_path=((node("hub"), arrow("leads to"), node("spoke")),),
            betweenness_ranking=("b1", "b2"),
            supernodes=("s1",),
        )
        response = ConeResponse(request=QueryRequest(mode=QueryMode.CONE), paths=(result,))

        body = composer.cone(response)

        cone, rule = body.children
        title, paths, table = cone.children
        assert title.activation == NodeActivation(NodeRef(3, 3))
        assert paths.role == "paths"
        assert isinstance(rule, Separator)

        assert isinstance(table, Table)
        (left, right), = table.rows
        assert left.children[0].text == "Between Centrality"
        assert left.children[1] == ListBlock(items=("b1", "b2"))
        assert right.children[0].text == "Supernodes"
        assert right.children[1] == ListBlock(items=("s1",))

    def test_rankings_keep_upstream_order(self, composer):
        result = ConeResult(
            title="hub", identity=NodeRef(1, 1), entire_path=(),
            betweenness_ranking=("zeta", "alpha", "mu"), supernodes=(),
        )
        response = ConeResponse(request=QueryRequest(mode=QueryMode.CONE), paths=(result,))

        table = composer.cone(response).children[0].children[2]

        assert table.rows[0][0].children[1].items == ("zeta", "alpha", "mu")


# =============================================================================
# BROWSE
# =============================================================================

class TestBrowseView:

    def test_categories_follow_browse_order(self, composer):
        per_category = tuple(
            (category, ((node(f"from-{category.name}"),),))
            for category in RelationCategory
        )
        entry = BrowseEntry(title="top", identity=NodeRef(1, 1), paths_per_category=per_category)
        response = BrowseResponse(request=QueryRequest(mode=QueryMode.BROWSE), nptrs=(entry,))

        body = composer.browse(response)

        block = body.children[0]
        names = [
            b.content.text for b in block.children[1:]
            if isinstance(b, Link)
        ]
        assert names == [
            "from-CONTAINED_BY",
            "from-PROPERTY_OF",
            "from-NEAR",
            "from-CONTAINS",
            "from-EXPRESSES_PROPERTY",
            "from-DERIVES_FROM",
            "from-LEADS_TO",
        ]

    def test_block_ends_with_rule(self, composer):
        entry = BrowseEntry(title="top", identity=NodeRef(1, 1), paths_per_category=())
        response = BrowseResponse(request=QueryRequest(mode=QueryMode.BROWSE), nptrs=(entry,))

        block = composer.browse(response).children[0]

        assert block.role == "browse"
        assert block.children[0].content.text == "top"
        assert isinstance(block.children[-1], Separator)
        assert len(block) == 2


# =============================================================================
# NEIGHBORHOOD AND PAGE
# =============================================================================

class TestNeighborhoodView:

    def test_one_fragment_and_rule_per_event(self, composer):
        response = NeighborhoodResponse(
            request=QueryRequest(),
            events=(make_event(text="a"), make_event(text="b")),
        )

        body = composer.neighborhood(response)

        assert [type(b).__name__ for b in body.children] == ["Group", "Separator", "Group", "Separator"]
        assert body.children[0].children[0].content.text == "* a"

    def test_compose_sets_mode_and_title(self, composer):
        response = NeighborhoodResponse(request=QueryRequest(), events=(make_event(text="a"),))

        document = composer.compose(response)

        assert document.mode is QueryMode.NEIGHBORHOOD
        assert document.title == "a"
        assert document.is_fallback is False


class TestPageView:

    def test_page_heading_and_notes(self, composer):
        page = PageView(title="Notes", context="ctx", notes=((node("first"),),))
        response = PageResponse(request=QueryRequest(mode=QueryMode.PAGE), page=page)

        body = composer.page(response)

        header = body.children[0]
        assert header.children[0].text == "Notes"
        assert header.children[1] == Text("ctx", style=TextStyle.CONTEXT)
        assert body.children[1].content.text == "first"
        assert isinstance(body.children[-1], Separator)


# =============================================================================
# FALLBACK
# =============================================================================

class TestFallback:

    @pytest.mark.parametrize("mode", list(QueryMode))
    def test_every_mode_has_a_message(self, composer, mode):
        document = composer.fallback(mode)

        assert document.is_fallback is True
        assert document.mode is mode
        assert document.body.role == "error"
        assert document.body.children[0].text == FALLBACK_MESSAGES[mode]

    def test_fallback_uses_default_title(self):
        document = ViewComposer(default_title="notes").fallback(QueryMode.TOC)

        assert document.title == "notes"
