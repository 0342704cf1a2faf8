"""
Semantic Spacetime Viewer: HTTP Server
======================================

Serves composed views of the graph query service as HTML pages, and the
abstract presentation documents as JSON for external renderers.

Endpoints:
- GET /health                  -> Liveness
- GET /                        -> Neighborhood of the default query
- GET /{mode}                  -> HTML page for orbit|cone|sequence|browse|toc|page
- GET /api/document/{mode}     -> Presentation document as JSON

Usage:
    uvicorn sstviewer.api.server:app --reload
"""

from __future__ import annotations
from contextlib import asynccontextmanager
from typing import Optional
import logging

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .. import configure_logging
from ..config import ViewerConfig
from ..client import GraphServiceClient
from ..dispatch import QueryDispatcher
from ..presentation import document_to_dict
from ..rendering import HtmlRenderer
from ..state import NodeRef, QueryMode, QueryRequest

logger = logging.getLogger(__name__)


class QueryParams(BaseModel):
    """Query string parameters shared by every view route."""
    name: str = ""
    chapter: str = ""
    context: str = ""
    nclass: Optional[int] = None
    ncptr: Optional[int] = None
    pagenr: int = 1

    def to_request(self, mode: QueryMode) -> QueryRequest:
        node = None
        if self.nclass is not None and self.ncptr is not None:
            node = NodeRef(node_class=self.nclass, pointer=self.ncptr)
        return QueryRequest(
            mode=mode,
            name=self.name,
            chapter=self.chapter,
            context=self.context,
            node=node,
            page_nr=max(1, self.pagenr),
        )


def _parse_mode(mode: str) -> QueryMode:
    try:
        return QueryMode(mode.lower())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown query mode: {mode}")


def create_app(
    config: Optional[ViewerConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> FastAPI:
    """Build the viewer app. transport overrides the service connection."""
    config = config or ViewerConfig.from_env()
    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Viewer querying graph service at %s", config.service_url)
        yield
        logger.info("Shutting down graph service connection.")
        app.state.dispatcher.close()

    app = FastAPI(
        title="Semantic Spacetime Viewer",
        version="0.1.0",
        description="Presentation layer for semantic spacetime graph queries",
        lifespan=lifespan,
    )

    # Read-only document API for external renderers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.dispatcher = QueryDispatcher(
        config, GraphServiceClient(config, transport=transport)
    )
    app.state.renderer = HtmlRenderer()

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    @app.get("/health")
    def health_check():
        """System status."""
        return {"status": "online", "service_url": config.service_url}

    @app.get("/api/document/{mode}")
    def get_document(
        mode: str,
        name: str = "",
        chapter: str = "",
        context: str = "",
        nclass: Optional[int] = None,
        ncptr: Optional[int] = None,
        pagenr: int = 1,
    ):
        """Abstract presentation document for a query, as JSON."""
        params = QueryParams(
            name=name, chapter=chapter, context=context,
            nclass=nclass, ncptr=ncptr, pagenr=pagenr,
        )
        document = app.state.dispatcher.dispatch(params.to_request(_parse_mode(mode)))
        return document_to_dict(document)

    @app.get("/", response_class=HTMLResponse)
    def index():
        """Neighborhood of the default (empty) query."""
        request = QueryRequest()
        document = app.state.dispatcher.dispatch(request)
        return app.state.renderer.render_page(document, request)

    @app.get("/{mode}", response_class=HTMLResponse)
    def get_view(
        mode: str,
        name: str = "",
        chapter: str = "",
        context: str = "",
        nclass: Optional[int] = None,
        ncptr: Optional[int] = None,
        pagenr: int = 1,
    ):
        """HTML page for one query mode."""
        params = QueryParams(
            name=name, chapter=chapter, context=context,
            nclass=nclass, ncptr=ncptr, pagenr=pagenr,
        )
        request = params.to_request(_parse_mode(mode))
        document = app.state.dispatcher.dispatch(request)
        return app.state.renderer.render_page(document, request)

    return app


app = create_app()
