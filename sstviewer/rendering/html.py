"""
HTML Renderer

Walks a presentation Document and materializes it as HTML.
Activations become links back into the viewer's own routes.

RENDERING RULES:
================
- All text is escaped
- External links open in a new context without a referrer
- Inline math is left intact for MathJax to typeset
"""

from __future__ import annotations
from html import escape
from typing import Callable, Dict, List, Optional
from urllib.parse import urlencode

from ..presentation import (
    Block, ChapterActivation, Document, ExternalActivation, Group, HeadingLevel,
    Image, Link, ListBlock, NodeActivation, ParagraphBreak, Preformatted,
    Separator, Table, Text, TextStyle,
)
from ..presentation.document import Activation
from ..state import QueryMode, QueryRequest


MATHJAX_SRC = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"

_HEADING_TAGS = {
    HeadingLevel.BODY: "p",
    HeadingLevel.H1: "h1",
    HeadingLevel.H2: "h2",
}

_STYLE_TAGS = {
    TextStyle.BODY: "span",
    TextStyle.EMPHASIS: "i",
    TextStyle.ARROW: "span",
    TextStyle.CHAPTER: "div",
    TextStyle.CONTEXT: "i",
    TextStyle.FULL_TEXT: "div",
    TextStyle.MESSAGE: "h2",
}


class HtmlRenderer:
    """Renders documents and blocks to HTML strings."""

    def __init__(self, route_prefix: str = ""):
        self._prefix = route_prefix.rstrip("/")
        self._handlers: Dict[type, Callable[[Block], str]] = {
            Text: self._text,
            Preformatted: self._preformatted,
            Link: self._link,
            Image: self._image,
            ListBlock: self._list,
            Table: self._table,
            Separator: lambda block: "<hr>",
            ParagraphBreak: lambda block: "<p></p>",
            Group: self._group,
        }

    def render_page(self, document: Document, request: Optional[QueryRequest] = None) -> str:
        """A complete HTML page: header, search form, article."""
        article_id = "errormesg" if document.is_fallback else "main_root"
        parts = [
            "<!DOCTYPE html>",
            "<html><head><meta charset=\"utf-8\">",
            f"<title>{escape(document.title)}</title>",
            f"<script async src=\"{MATHJAX_SRC}\"></script>",
            "</head><body>",
            f"<header><h2 id=\"header_root\">{escape(document.title)}</h2></header>",
            self._search_form(request),
            f"<article id=\"{article_id}\">{self.render(document.body)}</article>",
        ]
        if request is not None and request.mode is QueryMode.BROWSE and not document.is_fallback:
            parts.append(self._paging(request))
        parts.append("</body></html>")
        return "\n".join(parts)

    def render(self, block: Block) -> str:
        handler = self._handlers.get(type(block))
        if handler is None:
            raise TypeError(f"Cannot render block type {type(block).__name__}")
        return handler(block)

    def href(self, activation: Activation) -> str:
        if isinstance(activation, NodeActivation):
            query = {"nclass": activation.ref.node_class, "ncptr": activation.ref.pointer}
            return f"{self._prefix}/{QueryMode.NEIGHBORHOOD.value}?{urlencode(query)}"
        if isinstance(activation, ChapterActivation):
            query = {"chapter": activation.chapter, "context": activation.context}
            return f"{self._prefix}/{QueryMode.BROWSE.value}?{urlencode(query)}"
        return activation.url

    # =========================================================================
    # BLOCKS
    # =========================================================================

    def _text(self, block: Text) -> str:
        if block.style is TextStyle.HEADING:
            tag = _HEADING_TAGS[block.level]
        else:
            tag = _STYLE_TAGS[block.style]

        classes = [block.style.value]
        if block.enlarged:
            classes.append("enlarged")
        attrs = f" class=\"{' '.join(classes)}\""
        if block.tooltip:
            attrs += f" title=\"{escape(block.tooltip)}\""
        if block.hidden:
            attrs += " hidden"
        return f"<{tag}{attrs}>{escape(block.text)}</{tag}>"

    def _preformatted(self, block: Preformatted) -> str:
        return f"<pre>{escape(block.text)}</pre>"

    def _link(self, block: Link) -> str:
        attrs = f"href=\"{escape(self.href(block.activation))}\""
        if isinstance(block.activation, ExternalActivation):
            attrs += " target=\"_blank\" rel=\"noopener noreferrer\""
        return f"<a {attrs}>{self.render(block.content)}</a>"

    def _image(self, block: Image) -> str:
        return f"<img src=\"{escape(block.src)}\" alt=\"\">"

    def _list(self, block: ListBlock) -> str:
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{escape(item)}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"

    def _table(self, block: Table) -> str:
        rows = []
        for row in block.rows:
            cells = "".join(f"<td>{self.render(cell)}</td>" for cell in row)
            rows.append(f"<tr>{cells}</tr>")
        return f"<table>{''.join(rows)}</table>"

    def _group(self, block: Group) -> str:
        attrs = ""
        if block.role:
            attrs += f" class=\"{escape(block.role)}\""
        if block.radius is not None:
            attrs += f" id=\"radius-{block.radius}\""
        inner = "".join(self.render(child) for child in block.children)
        return f"<div{attrs}>{inner}</div>"

    # =========================================================================
    # PAGE CHROME
    # =========================================================================

    def _search_form(self, request: Optional[QueryRequest]) -> str:
        request = request or QueryRequest()
        fields: List[str] = []
        for name, value in (("name", request.name), ("chapter", request.chapter), ("context", request.context)):
            fields.append(
                f"<input type=\"text\" name=\"{name}\" placeholder=\"{name}\" value=\"{escape(value)}\">"
            )
        buttons = "".join(
            f"<button formaction=\"{self._prefix}/{mode.value}\">{mode.value}</button>"
            for mode in QueryMode
        )
        return f"<form id=\"search\" method=\"get\">{''.join(fields)}{buttons}</form>"

    def _paging(self, request: QueryRequest) -> str:
        links = []
        for label, target in (("dec", request.previous_page()), ("inc", request.next_page())):
            query = {
                "name": target.name,
                "chapter": target.chapter,
                "context": target.context,
                "pagenr": target.page_nr,
            }
            href = f"{self._prefix}/{QueryMode.BROWSE.value}?{urlencode(query)}"
            links.append(f"<a id=\"{label}\" href=\"{escape(href)}\">{label}</a>")
        links.insert(1, f"<span id=\"counter\">{request.page_nr}</span>")
        return f"<nav class=\"paging\">{' '.join(links)}</nav>"
