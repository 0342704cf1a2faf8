"""
View Composers

Assemble nodes, paths, headers and tables into a full document for
one query mode.

COMPOSITION FLOW:
=================
Response (tagged by mode) -> ViewComposer -> Document
Each view is a pure function of its response.
"""

from __future__ import annotations
from typing import Final, List, Tuple

from ..presentation import (
    Block, ChapterActivation, Document, Group, HeadingLevel, Link, ListBlock,
    NodeActivation, Separator, Table, Text, TextStyle,
)
from ..state import (
    THEN_LABEL, BrowseResponse, ConeResponse, ConeResult, NeighborhoodResponse,
    PageResponse, QueryMode, RelationCategory, Response, SequenceResponse, Story,
    TEMPORAL_ARROWS, TOCResponse,
)
from .header import compose_header
from .links import HEADER_TRUNCATION, ITEM_TRUNCATION, TruncationPolicy
from .orbit import Direction, OrbitComposer
from .paths import PathComposer


BROWSE_ORDER: Final[Tuple[RelationCategory, ...]] = (
    RelationCategory.CONTAINED_BY,
    RelationCategory.PROPERTY_OF,
    RelationCategory.NEAR,
    RelationCategory.CONTAINS,
    RelationCategory.EXPRESSES_PROPERTY,
    RelationCategory.DERIVES_FROM,
    RelationCategory.LEADS_TO,
)

BETWEENNESS_HEADING: Final[str] = "Between Centrality"
SUPERNODES_HEADING: Final[str] = "Supernodes"

FALLBACK_MESSAGES: Final[dict] = {
    QueryMode.NEIGHBORHOOD: "No results in orbit (perhaps no connection)",
    QueryMode.CONE: "No results in Geometry (perhaps no connection)",
    QueryMode.SEQUENCE: "No results in Tales (perhaps no connection)",
    QueryMode.BROWSE: "No results in browsing",
    QueryMode.TOC: "No result in TOC",
    QueryMode.PAGE: "No results in notes (perhaps no connection)",
}


class ViewComposer:
    """
    Composes a Document for any response shape.

    SINGLE ENTRY POINT:
    ===================
    compose() selects the view from the envelope type. Each view is also
    callable directly.
    """

    def __init__(
        self,
        default_title: str = "app",
        item_truncation: TruncationPolicy = ITEM_TRUNCATION,
        header_truncation: TruncationPolicy = HEADER_TRUNCATION,
        temporal_arrows=TEMPORAL_ARROWS,
        short_text_limit: int = 20,
    ):
        self._default_title = default_title
        self._header_truncation = header_truncation
        self._orbit = OrbitComposer(item_truncation, short_text_limit)
        self._paths = PathComposer(temporal_arrows, short_text_limit)

    @classmethod
    def from_config(cls, config) -> 'ViewComposer':
        return cls(
            default_title=config.default_title,
            item_truncation=config.item_truncation,
            header_truncation=config.header_truncation,
            temporal_arrows=config.temporal_arrows,
            short_text_limit=config.short_text_limit,
        )

    def compose(self, response: Response) -> Document:
        views = {
            QueryMode.NEIGHBORHOOD: self.neighborhood,
            QueryMode.CONE: self.cone,
            QueryMode.SEQUENCE: self.sequence,
            QueryMode.BROWSE: self.browse,
            QueryMode.TOC: self.table_of_contents,
            QueryMode.PAGE: self.page,
        }
        body = views[response.mode](response)
        return Document(mode=response.mode, title=self.header(response), body=body)

    def header(self, response: Response) -> str:
        return compose_header(response, self._default_title, self._header_truncation)

    def fallback(self, mode: QueryMode) -> Document:
        """The shared "no results" document for a failed query."""
        message = Text(FALLBACK_MESSAGES[mode], style=TextStyle.MESSAGE, level=HeadingLevel.H2)
        return Document(
            mode=mode,
            title=self._default_title,
            body=Group(children=(message,), role="error"),
            is_fallback=True,
        )

    # =========================================================================
    # VIEWS
    # =========================================================================

    def neighborhood(self, response: NeighborhoodResponse) -> Group:
        blocks: List[Block] = []
        for event in response.events:
            blocks.append(self._orbit.compose(event, counter=0, direction=Direction.ALL, skip_label=""))
            blocks.append(Separator())
        return Group(children=tuple(blocks), role="main")

    def cone(self, response: ConeResponse) -> Group:
        blocks: List[Block] = []
        for result in response.paths:
            blocks.append(self._cone_result(result))
            blocks.append(Separator())
        return Group(children=tuple(blocks), role="main")

    def sequence(self, response: SequenceResponse) -> Group:
        stories = response.stories
        if len(stories) > 1:
            return Group(children=self._story_titles(stories), role="main")
        if len(stories) == 1:
            return Group(children=self._story(stories[0]), role="main")
        return Group(role="main")

    def browse(self, response: BrowseResponse) -> Group:
        blocks: List[Block] = []
        for entry in response.nptrs:
            block = Group(
                children=(Link(Text(entry.title), NodeActivation(entry.identity)),),
                role="browse",
            )
            for category in BROWSE_ORDER:
                block = self._paths.compose(entry.paths(category), into=block)
            blocks.append(block.extend(Separator()))
        return Group(children=tuple(blocks), role="main")

    def table_of_contents(self, response: TOCResponse) -> Group:
        blocks: List[Block] = []
        for entry in response.entries:
            blocks.append(Link(
                Text(entry.chapter, style=TextStyle.HEADING, level=HeadingLevel.H1),
                ChapterActivation(entry.chapter, ""),
            ))
            blocks.append(Group(
                children=tuple(
                    Link(Text(context), ChapterActivation(entry.chapter, context))
                    for context in entry.contexts
                ),
                role="toc-panel",
            ))
            blocks.append(Separator())
        return Group(children=tuple(blocks), role="main")

    def page(self, response: PageResponse) -> Group:
        page = response.page
        header = Group(children=(
            Text(page.title, style=TextStyle.HEADING, level=HeadingLevel.H1),
            Text(page.context, style=TextStyle.CONTEXT),
        ))
        return self._paths.compose(page.notes, into=Group(children=(header,), role="main"))

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _cone_result(self, result: ConeResult) -> Group:
        title = Link(Text(result.title), NodeActivation(result.identity))
        paths = self._paths.compose(result.entire_path)
        rankings = Table(rows=((
            self._ranked_column(BETWEENNESS_HEADING, result.betweenness_ranking),
            self._ranked_column(SUPERNODES_HEADING, result.supernodes),
        ),))
        return Group(children=(title, paths, rankings), role="cone")

    def _ranked_column(self, heading: str, items: Tuple[str, ...]) -> Group:
        return Group(children=(
            Text(heading, style=TextStyle.HEADING, level=HeadingLevel.H2),
            ListBlock(items=tuple(items)),
        ))

    def _story_titles(self, stories: Tuple[Story, ...]) -> Tuple[Block, ...]:
        blocks: List[Block] = []
        for counter, story in enumerate(stories, start=1):
            title = Text(f"{counter}. {story.text}", style=TextStyle.HEADING, level=HeadingLevel.H1)
            blocks.append(self._maybe_link(title, story))
            blocks.append(Text(f" in {story.arrow_context}", style=TextStyle.CONTEXT))
            blocks.append(Separator())
        return tuple(blocks)

    def _story(self, story: Story) -> Tuple[Block, ...]:
        blocks: List[Block] = [
            Text(story.text, style=TextStyle.HEADING, level=HeadingLevel.H1),
            Text(story.arrow_context, style=TextStyle.CONTEXT),
        ]
        for counter, event in enumerate(story.axis, start=1):
            blocks.append(self._orbit.compose(
                event,
                counter=counter,
                direction=Direction.FORWARD,
                skip_label=THEN_LABEL,
                heading_level=HeadingLevel.BODY,
            ))
        return tuple(blocks)

    def _maybe_link(self, title: Text, story: Story) -> Block:
        if story.container is None:
            return title
        return Link(title, NodeActivation(story.container))
