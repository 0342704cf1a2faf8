"""
Rendering Layer

Materializes presentation documents for a concrete output medium.
"""

from .html import HtmlRenderer

__all__ = ['HtmlRenderer']
