"""
Composition Engine

Turns state snapshots into presentation documents.
No network access, no rendering, no mutable state.
"""

from .links import (
    LinkKind, TruncationPolicy, ITEM_TRUNCATION, HEADER_TRUNCATION,
    classify, is_image_ref, is_url_ref, is_math_markup,
)
from .orbit import Direction, OrbitComposer, ORBIT_ORDER
from .paths import PathComposer
from .header import compose_header
from .views import ViewComposer, BROWSE_ORDER, FALLBACK_MESSAGES

__all__ = [
    'LinkKind', 'TruncationPolicy', 'ITEM_TRUNCATION', 'HEADER_TRUNCATION',
    'classify', 'is_image_ref', 'is_url_ref', 'is_math_markup',
    'Direction', 'OrbitComposer', 'ORBIT_ORDER',
    'PathComposer',
    'compose_header',
    'ViewComposer', 'BROWSE_ORDER', 'FALLBACK_MESSAGES',
]
