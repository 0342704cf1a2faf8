"""
Semantic Spacetime Viewer

Composes knowledge graph query results (neighborhoods, cones, stories,
browse listings, chapter indexes) into presentation documents.

LAYER FLOW:
===========
1. Client: query the graph service
2. Mapper: wire payload -> immutable state
3. Composition: state -> presentation document
4. Rendering: document -> HTML
"""

import logging

from .config import ViewerConfig
from .dispatch import QueryDispatcher
from .state import QueryMode, QueryRequest, NodeRef

__version__ = "0.1.0"


def configure_logging(level: str = "INFO") -> None:
    """Install a basic handler and set the level of the sstviewer loggers."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(__name__).setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = [
    'ViewerConfig', 'QueryDispatcher', 'QueryMode', 'QueryRequest', 'NodeRef',
    'configure_logging',
]
