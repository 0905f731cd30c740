"""Export adapters for documents.

Every exporter turns a :class:`~compositor.document.Document` into bytes
using only its synthesized text or its node listing; the tree itself is
never serialized.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .constants import EditorConstants
from .document import Document
from .pagination import paginate
from .pdf_generator import PDFGenerator
from .traversal import node_listing

logger = logging.getLogger(__name__)


class CompositorError(Exception):
    """Base class for errors raised by compositor."""


class UnsupportedFormatError(CompositorError):
    """Raised when no exporter is registered for a format."""

    def __init__(self, format_name: str):
        super().__init__(f"Unsupported export format: {format_name}")
        self.format_name = format_name


class Exporter(ABC):
    """Base class for export formats."""

    extension: str = ""

    @abstractmethod
    def content(self, document: Document) -> bytes:
        """Return the exported representation of ``document``."""

    def export(self, document: Document, path: str) -> str:
        with open(path, 'wb') as f:
            f.write(self.content(document))
        return path


class TextExporter(Exporter):
    extension = ".txt"

    def content(self, document: Document) -> bytes:
        return document.text().encode('utf-8')


class JsonExporter(Exporter):
    """JSON array with one ``{id, type, text}`` object per unit."""

    extension = ".json"

    def content(self, document: Document) -> bytes:
        nodes = [
            {"id": unit_id, "type": kind, "text": text}
            for unit_id, kind, text in node_listing(document.root)
        ]
        return json.dumps(nodes, indent=2, ensure_ascii=False).encode('utf-8')


class PdfExporter(Exporter):
    extension = ".pdf"

    def __init__(self, page_size: int = EditorConstants.DEFAULT_PAGE_SIZE,
                 generator: Optional[PDFGenerator] = None):
        self.page_size = page_size
        self.generator = generator or PDFGenerator()

    def content(self, document: Document) -> bytes:
        pdf = self.generator.generate_pdf(paginate(document.text(), self.page_size))
        warning = self.generator.get_unprintable_warning()
        if warning:
            logger.warning(f"{document.name}: {warning}")
        return pdf


EXPORTERS: Dict[str, Type[Exporter]] = {
    "txt": TextExporter,
    "json": JsonExporter,
    "pdf": PdfExporter,
}


def get_exporter(format_name: str) -> Exporter:
    """Return an exporter instance for ``format_name`` (case-insensitive).

    Raises:
        UnsupportedFormatError: If the format has no registered exporter.
    """
    exporter_cls = EXPORTERS.get(format_name.lower())
    if exporter_cls is None:
        raise UnsupportedFormatError(format_name)
    return exporter_cls()


def export_document(document: Document, format_name: str, path: str) -> str:
    return get_exporter(format_name).export(document, path)
