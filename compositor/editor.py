"""Editor controller tying documents, scanning, cursor and output together."""

import logging
from typing import List, Optional, Tuple

from .builder import replace_text as replace_in_words
from .cursor import Cursor, clear_highlights, highlight
from .document import Document, DocumentManager
from .export import export_document
from .pdf_generator import PDFGenerator
from .print_output import PrintOutput
from .printing import Orientation, PrintManager, PrintPreview, PrintSettings
from .scanner import HighlightToken, ScanError, Scanner, find_matches
from .settings_persistence import SettingsPersistence, get_persistence
from .traversal import count_words

logger = logging.getLogger(__name__)


class Editor:
    """Front end for the active document.

    Every operation acts on the active document; with no document open,
    queries return empty results and mutations do nothing.
    """

    def __init__(self, persistence: Optional[SettingsPersistence] = None):
        self.documents = DocumentManager()
        self.cursor = Cursor()
        self.scanner = Scanner()
        self.print_manager = PrintManager()
        self.persistence = persistence or get_persistence()

    @property
    def current(self) -> Optional[Document]:
        return self.documents.active

    # --- Documents ---
    def _release_cursor(self) -> None:
        # The cursor belongs to one document; drop its mark before leaving it
        self.cursor.reset(self.current.root if self.current else None)

    def new_document(self, name: str) -> Document:
        self._release_cursor()
        return self.documents.new_document(name)

    def open_document(self, path: str) -> Document:
        doc = Document()
        doc.load(path)
        self._release_cursor()
        return self.documents.add(doc)

    def switch_document(self, name: str) -> bool:
        target = self.documents.find(name)
        if target is None:
            return False
        self._release_cursor()
        self.documents.switch_to(name)
        return True

    def close_document(self, name: str) -> bool:
        target = self.documents.find(name)
        if target is None:
            return False
        if target is self.current:
            self._release_cursor()
        return self.documents.close_document(name)

    def save(self, path: Optional[str] = None) -> Optional[str]:
        if self.current is None:
            return None
        return self.current.save(path)

    # --- Editing ---
    def insert_text(self, text: str) -> None:
        """Append ``text`` to the active document."""
        if self.current is None:
            return
        self.current.set_text(self.current.text() + text)
        self.cursor.reset()

    def replace_text(self, text: str) -> None:
        """Replace the whole active document with ``text``."""
        if self.current is None:
            return
        self.current.set_text(text)
        self.cursor.reset()

    def find_replace(self, old: str, new: str, ignore_case: bool = False) -> int:
        if self.current is None:
            return 0
        changed = replace_in_words(self.current.root, old, new, ignore_case)
        if changed:
            self.current.modified = True
            # Rebuilt words get new letters
            self.cursor.sync(self.current.root)
        return changed

    def text(self) -> str:
        return self.current.text() if self.current else ""

    def word_count(self) -> int:
        return count_words(self.current.root) if self.current else 0

    # --- Marks ---
    def highlight(self, unit_id: int) -> bool:
        if self.current is None:
            return False
        return highlight(self.current.root, unit_id)

    def clear_highlights(self) -> int:
        if self.current is None:
            return 0
        return clear_highlights(self.current.root)

    def move_cursor_to(self, unit_id: int) -> bool:
        if self.current is None:
            return False
        return self.cursor.move_to(self.current.root, unit_id)

    # --- Scanning ---
    def find(self, pattern: str) -> List[HighlightToken]:
        if self.current is None:
            return []
        return find_matches(self.current.root, pattern)

    def highlight_tokens(self) -> List[HighlightToken]:
        if self.current is None:
            return []
        return self.scanner.highlight(self.current.root)

    def validate(self) -> List[ScanError]:
        if self.current is None:
            return []
        return self.scanner.validate(self.current.root)

    # --- Output ---
    def print_settings(self) -> PrintSettings:
        """Settings remembered for the active document, or defaults."""
        path = self.current.path if self.current else None
        return self.persistence.load_print_settings(path)

    def preview(self, settings: Optional[PrintSettings] = None) -> PrintPreview:
        settings = settings or self.print_settings()
        return self.print_manager.preview(self.text(), settings)

    def print(self, settings: Optional[PrintSettings] = None) -> List[str]:
        """Run the print loop for the active document and remember the settings."""
        if self.current is None:
            return []
        settings = settings or self.print_settings()
        output = self.print_manager.print_job(self.text(), settings)
        self.persistence.save_print_settings(self.current.path, settings)
        return output

    def export(self, format_name: str, path: str) -> Optional[str]:
        """Export the active document.

        Raises:
            UnsupportedFormatError: If ``format_name`` has no exporter.
        """
        if self.current is None:
            return None
        written = export_document(self.current, format_name, path)
        logger.info(f"Exported {self.current.name} as {format_name} to {written}")
        return written

    def _selected_pages(self, settings: PrintSettings) -> List[str]:
        return [page for _, page in self.print_manager.select(self.text(), settings)]

    def send_to_printer(self, settings: Optional[PrintSettings] = None,
                        output: Optional[PrintOutput] = None) -> Tuple[bool, str]:
        """Submit the selected pages of the active document to a CUPS printer.

        Returns:
            Tuple of (success, message); see :meth:`PrintOutput.print_to_printer`.
        """
        if self.current is None:
            return False, "No active document"
        settings = settings or self.print_settings()
        pages = self._selected_pages(settings)
        if not pages:
            return False, "Nothing to print"
        output = output or PrintOutput()
        success, message = output.print_to_printer(
            pages, settings.printer_name, duplex=settings.duplex,
            copies=settings.copies, orientation=settings.orientation)
        if success:
            self.persistence.save_print_settings(self.current.path, settings)
        return success, message

    def print_to_file(self, filename: str, settings: Optional[PrintSettings] = None,
                      output: Optional[PrintOutput] = None) -> Tuple[bool, str]:
        """Write the selected pages of the active document to a PDF file.

        Returns:
            Tuple of (success, message); see :meth:`PrintOutput.save_to_file`.
        """
        if self.current is None:
            return False, "No active document"
        settings = settings or self.print_settings()
        pages = self._selected_pages(settings)
        if not pages:
            return False, "Nothing to print"
        output = output or PrintOutput(PDFGenerator(
            landscape_mode=settings.orientation == Orientation.LANDSCAPE))
        return output.save_to_file(pages, filename)
