"""
Graph Service Client

Posts queries to the semantic spacetime query service and returns
decoded JSON payloads.

GUARANTEES:
===========
1. A payload is returned only for a complete 2xx response
2. Every transport failure or error status raises ServiceUnavailable
3. No retries, no caching across queries
"""

from __future__ import annotations
from typing import Any, Optional
import logging

import httpx

from .config import ViewerConfig
from .errors import ServiceUnavailable
from .state import QueryRequest

logger = logging.getLogger(__name__)


class GraphServiceClient:
    """Synchronous client for the graph query service."""

    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._config = config or ViewerConfig()
        self._client = httpx.Client(
            base_url=self._config.service_url,
            timeout=self._config.timeout,
            transport=transport,
            follow_redirects=True,
        )

    def query(self, request: QueryRequest) -> Any:
        """
        Post one query and return its decoded JSON body.

        Raises ServiceUnavailable on timeout, network error, non-2xx
        status or an undecodable body.
        """
        endpoint = request.mode.endpoint
        logger.debug("POST %s %s", endpoint, request.as_form())

        try:
            response = self._client.post(endpoint, data=request.as_form())
        except httpx.TimeoutException as e:
            logger.warning("Query %s timed out: %s", endpoint, e)
            raise ServiceUnavailable(f"Timed out querying {endpoint}") from e
        except httpx.HTTPError as e:
            logger.warning("Query %s failed: %s", endpoint, e)
            raise ServiceUnavailable(f"Could not reach {endpoint}: {e}") from e

        if not response.is_success:
            logger.warning("Query %s returned HTTP %d", endpoint, response.status_code)
            raise ServiceUnavailable(
                f"HTTP {response.status_code} from {endpoint}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Query %s returned a non-JSON body", endpoint)
            raise ServiceUnavailable(f"Undecodable body from {endpoint}") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> 'GraphServiceClient':
        return self

    def __exit__(self, *exc) -> None:
        self.close()
