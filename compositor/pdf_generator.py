"""Generate PDF output from paginated document text.

Each page of text is laid out in the built-in Courier font, wrapped at a
fixed number of characters per line, one PDF page per text page.
"""

import io
import textwrap
from typing import List

from reportlab.lib.pagesizes import landscape, letter
from reportlab.pdfgen import canvas

from .constants import EditorConstants


class PDFGenerator:
    """Generate PDF files for printing text documents."""

    def __init__(self, font_name: str = "Courier", font_size: int = 12,
                 line_width: int = EditorConstants.PDF_LINE_WIDTH,
                 landscape_mode: bool = False):
        """Initialize PDF generator.

        Args:
            font_name: Built-in PDF font to draw with.
            font_size: Point size; also used as the line height.
            line_width: Characters per line before wrapping.
            landscape_mode: Lay pages out in landscape orientation.
        """
        self.pagesize = landscape(letter) if landscape_mode else letter
        self.page_width, self.page_height = self.pagesize
        self.font_name = font_name
        self.font_size = font_size
        self.line_height = font_size
        self.line_width = line_width
        self.left_margin = 36
        # First baseline half an inch below the top edge
        self.starting_y = self.page_height - 36

        # Track unprintable characters for warning
        self.unprintable_chars = set()
        self.has_unprintable = False

    def layout_page(self, page: str) -> List[str]:
        """Break one text page into lines no longer than ``line_width``."""
        lines: List[str] = []
        for raw_line in page.split("\n"):
            if not raw_line:
                lines.append("")
                continue
            lines.extend(textwrap.wrap(raw_line, self.line_width,
                                       replace_whitespace=False,
                                       drop_whitespace=False) or [""])
        return lines

    def generate_pdf(self, pages: List[str]) -> bytes:
        """Generate PDF from text pages.

        Args:
            pages: Page strings as produced by ``paginate``.

        Returns:
            Complete PDF document as bytes.
        """
        # Reset unprintable tracking for this generation
        self.unprintable_chars = set()
        self.has_unprintable = False
        pdf_buffer = io.BytesIO()

        c = canvas.Canvas(pdf_buffer, pagesize=self.pagesize)

        for page in pages:
            y_position = self.starting_y
            c.setFont(self.font_name, self.font_size)
            for line in self.layout_page(page):
                if y_position < self.line_height:
                    # Text page longer than the sheet: continue on a new sheet
                    c.showPage()
                    c.setFont(self.font_name, self.font_size)
                    y_position = self.starting_y
                c.drawString(self.left_margin, y_position, self._make_pdf_safe(line))
                y_position -= self.line_height
            c.showPage()

        c.save()

        pdf_buffer.seek(0)
        return pdf_buffer.read()

    def _make_pdf_safe(self, text: str) -> str:
        """Replace characters the built-in fonts cannot show with '?'.

        The built-in Courier font supports Windows-1252; anything else is
        replaced and remembered for :meth:`get_unprintable_warning`.
        """
        result = []
        for char in text:
            try:
                char.encode('cp1252')
                result.append(char)
            except UnicodeEncodeError:
                self.unprintable_chars.add(char)
                self.has_unprintable = True
                result.append('?')
        return ''.join(result)

    def get_unprintable_warning(self) -> str | None:
        """Get warning message about unprintable characters.

        Returns:
            Warning message if unprintable chars were found, None otherwise.
        """
        if not self.has_unprintable:
            return None

        char_list = sorted(self.unprintable_chars)

        formatted_chars = []
        for char in char_list[:10]:  # Limit to first 10 for readability
            if ord(char) < 32 or ord(char) == 127:  # Control characters
                formatted_chars.append(f"U+{ord(char):04X}")
            else:
                formatted_chars.append(f"'{char}' (U+{ord(char):04X})")

        if len(char_list) > 10:
            formatted_chars.append(f"... and {len(char_list) - 10} more")

        return (f"Warning: {len(self.unprintable_chars)} unique unprintable character(s) "
                f"were replaced with '?' in the PDF output: {', '.join(formatted_chars)}")
