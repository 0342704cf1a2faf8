"""
Query Dispatch

Runs one query end to end: client -> mapper -> composer.

LAYER FLOW:
===========
1. Client: QueryRequest -> JSON payload (or ServiceUnavailable)
2. Mapper: JSON payload -> tagged Response (or MalformedResponse)
3. Composer: Response -> Document
Failures in 1 or 2 produce the mode's fallback document.
"""

from __future__ import annotations
from typing import Any, Optional
import logging

from .client import GraphServiceClient
from .composition import ViewComposer
from .config import ViewerConfig
from .errors import MalformedResponse, ServiceUnavailable
from .mapper import ResponseMapper
from .presentation import Activation, Document
from .state import QueryRequest

logger = logging.getLogger(__name__)


class QueryDispatcher:
    """
    Dispatches queries and always yields a Document.

    Each call owns its own response; nothing is shared between calls.
    """

    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        client: Optional[GraphServiceClient] = None,
    ):
        self._config = config or ViewerConfig()
        self._client = client or GraphServiceClient(self._config)
        self._mapper = ResponseMapper()
        self._composer = ViewComposer.from_config(self._config)

    def dispatch(self, request: QueryRequest) -> Document:
        try:
            payload = self._client.query(request)
        except ServiceUnavailable as e:
            logger.warning("Falling back for %s (%s): %s", request.mode.value, e.code.name, e.message)
            return self._composer.fallback(request.mode)
        return self.render_payload(request, payload)

    def render_payload(self, request: QueryRequest, payload: Any) -> Document:
        """Compose an already-received payload."""
        try:
            response = self._mapper.map_response(request, payload)
        except MalformedResponse as e:
            logger.warning("Falling back for %s (%s): %s", request.mode.value, e.code.name, e.message)
            return self._composer.fallback(request.mode)
        return self._composer.compose(response)

    def activate(self, activation: Activation) -> Optional[Document]:
        """Follow a document activation. External links yield None."""
        request = activation.to_request()
        if request is None:
            return None
        return self.dispatch(request)

    def close(self) -> None:
        self._client.close()
