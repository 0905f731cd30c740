"""Documents and the set of open documents.

A :class:`Document` owns one composite tree and the raw-text storage
around it. The tree is always rebuilt from text on load or whole-text
replacement; saving writes the synthesized text back atomically.
"""

import logging
import os
import tempfile
from typing import List, Optional

from .builder import build
from .constants import EditorConstants
from .units import Root

logger = logging.getLogger(__name__)


class Document:
    """A named document backed by an optional file path."""

    def __init__(self, name: str = "Untitled", path: Optional[str] = None):
        self.name = name
        self.path = path
        self.root: Root = build("")
        self.modified = False

    @classmethod
    def create_new(cls, name: str = "Untitled") -> "Document":
        return cls(name=name)

    def text(self) -> str:
        return self.root.text()

    def set_text(self, content: str) -> None:
        """Replace the whole document, rebuilding the tree."""
        self.root = build(content)
        self.modified = True

    def load(self, path: str) -> None:
        """Load raw text from ``path``.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
        self.path = path
        self.name = os.path.basename(path) or self.name
        self.root = build(content)
        self.modified = False
        logger.info(f"Loaded {path}")

    def default_path(self) -> str:
        return self.path or f"{self.name}{EditorConstants.DEFAULT_EXTENSION}"

    def save(self, path: Optional[str] = None) -> str:
        """Save the document text to ``path`` (or its current path) atomically.

        Returns:
            The path written.

        Raises:
            OSError: If the file cannot be written; no partial file is left.
        """
        target = path or self.default_path()
        content = self.text()

        # Temp file in the same directory so the rename stays on one filesystem
        dir_name = os.path.dirname(target) or '.'
        base_name = os.path.basename(target)
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(
                mode='w', encoding='utf-8', dir=dir_name,
                prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
                suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                delete=False,
            ) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, target)
        except OSError as e:
            logger.warning(f"Could not save {target}: {e}")
            if temp_filename and os.path.exists(temp_filename):
                os.remove(temp_filename)
            raise

        self.path = target
        self.modified = False
        logger.info(f"Saved {target}")
        return target


class DocumentManager:
    """Keeps the open documents and tracks which one is active."""

    def __init__(self):
        self._documents: List[Document] = []
        self.active: Optional[Document] = None

    def add(self, doc: Document) -> Document:
        """Register ``doc`` and make it the active document."""
        self._documents.append(doc)
        self.active = doc
        return doc

    def new_document(self, name: str) -> Document:
        return self.add(Document.create_new(name))

    def open_document(self, path: str) -> Document:
        doc = Document()
        doc.load(path)
        return self.add(doc)

    def find(self, name: str) -> Optional[Document]:
        for doc in self._documents:
            if doc.name == name:
                return doc
        return None

    def close_document(self, name: str) -> bool:
        """Close the first document called ``name``.

        If it was active, the most recently opened remaining document
        becomes active.
        """
        doc = self.find(name)
        if doc is None:
            return False
        self._documents.remove(doc)
        if self.active is doc:
            self.active = self._documents[-1] if self._documents else None
        return True

    def switch_to(self, name: str) -> bool:
        doc = self.find(name)
        if doc is None:
            return False
        self.active = doc
        return True

    def documents(self) -> List[Document]:
        return list(self._documents)
