"""Compositor - a composite-tree document editor core."""

from .builder import build, rebuild_word, replace_text
from .cursor import Cursor, highlight, move_cursor_to
from .document import Document, DocumentManager
from .editor import Editor
from .export import CompositorError, UnsupportedFormatError
from .pagination import paginate, select_pages
from .printing import PrintSettings
from .scanner import HighlightToken, ScanError, Scanner, TokenType, find_matches, validate
from .traversal import traverse
from .units import Letter, Paragraph, Root, Sentence, TextUnit, Word

__all__ = [
    'build',
    'rebuild_word',
    'replace_text',
    'traverse',
    'highlight',
    'move_cursor_to',
    'Cursor',
    'find_matches',
    'validate',
    'Scanner',
    'HighlightToken',
    'ScanError',
    'TokenType',
    'paginate',
    'select_pages',
    'PrintSettings',
    'Document',
    'DocumentManager',
    'Editor',
    'CompositorError',
    'UnsupportedFormatError',
    'TextUnit',
    'Root',
    'Paragraph',
    'Sentence',
    'Word',
    'Letter',
]
