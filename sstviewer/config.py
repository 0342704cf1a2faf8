"""
Viewer Configuration

Unified configuration for the client, composers and server.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional, Tuple
import os

from .composition.links import HEADER_TRUNCATION, ITEM_TRUNCATION, TruncationPolicy
from .state import TEMPORAL_ARROWS


DEFAULT_SERVICE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 30.0
DEFAULT_TITLE = "app"


@dataclass
class ViewerConfig:
    """Configuration for the whole viewer."""
    service_url: str = DEFAULT_SERVICE_URL
    timeout: float = DEFAULT_TIMEOUT
    default_title: str = DEFAULT_TITLE
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)

    # Composition
    temporal_arrows: FrozenSet[int] = field(default_factory=lambda: TEMPORAL_ARROWS)
    item_truncation: Optional[TruncationPolicy] = None
    header_truncation: Optional[TruncationPolicy] = None
    short_text_limit: int = 20

    def __post_init__(self):
        self.service_url = self.service_url.rstrip("/")
        self.temporal_arrows = frozenset(self.temporal_arrows)
        self.item_truncation = self.item_truncation or ITEM_TRUNCATION
        self.header_truncation = self.header_truncation or HEADER_TRUNCATION
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ViewerConfig':
        """Build a config from SST_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            service_url=env.get("SST_SERVICE_URL", DEFAULT_SERVICE_URL),
            timeout=float(env.get("SST_TIMEOUT", DEFAULT_TIMEOUT)),
            default_title=env.get("SST_DEFAULT_TITLE", DEFAULT_TITLE),
            log_level=env.get("SST_LOG_LEVEL", "INFO").upper(),
            cors_origins=tuple(
                o.strip() for o in env.get("SST_CORS_ORIGINS", "*").split(",") if o.strip()
            ),
        )
