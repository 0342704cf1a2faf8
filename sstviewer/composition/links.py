"""
Link Classifier

Decides how a relation's text payload is presented: image, URL,
mathematical markup or plain text. Pure functions, no error cases.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Final, Optional


IMAGE_LABELS: Final[FrozenSet[str]] = frozenset({"has image", "is an image for"})
URL_LABELS: Final[FrozenSet[str]] = frozenset({"has URL"})

MATH_OPEN: Final[str] = "\\("
MATH_CLOSE: Final[str] = "\\)"

ELLIPSIS: Final[str] = "..."


class LinkKind(Enum):
    IMAGE = "image"
    URL = "url"
    PREFORMATTED = "preformatted"
    PLAIN = "plain"


def has_web_scheme(text: Optional[str]) -> bool:
    return bool(text) and (text.startswith("http://") or text.startswith("https://"))


def is_image_ref(text: Optional[str], label: Optional[str]) -> bool:
    """True iff the label names an image relation and the text is a web address."""
    return label in IMAGE_LABELS and has_web_scheme(text)


def is_url_ref(text: Optional[str], label: Optional[str]) -> bool:
    """True iff the label names a URL relation and the text is a web address."""
    return label in URL_LABELS and has_web_scheme(text)


def is_math_markup(text: Optional[str]) -> bool:
    """True iff the text holds both inline-math delimiters."""
    return bool(text) and MATH_OPEN in text and MATH_CLOSE in text


def classify(text: Optional[str], label: Optional[str]) -> LinkKind:
    """
    Classify a relation payload.

    Line breaks win over everything; anything unrecognised is plain.
    """
    if text and "\n" in text:
        return LinkKind.PREFORMATTED
    if is_url_ref(text, label):
        return LinkKind.URL
    if is_image_ref(text, label):
        return LinkKind.IMAGE
    return LinkKind.PLAIN


# =============================================================================
# TRUNCATION
# =============================================================================

@dataclass(frozen=True)
class TruncationPolicy:
    """
    Single truncation rule for long display strings.

    Text strictly longer than threshold is cut to keep characters
    plus an ellipsis. Math markup is never cut.
    """
    threshold: int
    keep: int

    def __post_init__(self):
        if not 0 < self.keep <= self.threshold:
            raise ValueError(
                f"keep must be in (0, threshold]: keep={self.keep}, threshold={self.threshold}"
            )

    def applies(self, text: str) -> bool:
        return len(text) > self.threshold and not is_math_markup(text)

    def apply(self, text: str) -> str:
        if not self.applies(text):
            return text
        return text[:self.keep] + ELLIPSIS


ITEM_TRUNCATION: Final[TruncationPolicy] = TruncationPolicy(threshold=90, keep=70)
HEADER_TRUNCATION: Final[TruncationPolicy] = TruncationPolicy(threshold=60, keep=57)
