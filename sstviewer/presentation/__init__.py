"""
Presentation Contracts

Abstract document tree produced by the composers and consumed by renderers.
"""

from .document import (
    TextStyle, HeadingLevel,
    NodeActivation, ChapterActivation, ExternalActivation, Activation,
    Text, Preformatted, Link, Image, ListBlock, Table, Separator, ParagraphBreak,
    Group, Block, Document,
    document_to_dict, DocumentEncoder,
)

__all__ = [
    'TextStyle', 'HeadingLevel',
    'NodeActivation', 'ChapterActivation', 'ExternalActivation', 'Activation',
    'Text', 'Preformatted', 'Link', 'Image', 'ListBlock', 'Table', 'Separator',
    'ParagraphBreak', 'Group', 'Block', 'Document',
    'document_to_dict', 'DocumentEncoder',
]
