"""Print settings, print preview and the console print loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List

from .constants import EditorConstants
from .pagination import paginate, parse_page_range

logger = logging.getLogger(__name__)


class Orientation(Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass
class PrintSettings:
    """Options for one print or preview request.

    Printer name and orientation are not interpreted here; they are echoed
    into the preview and passed through to the printer.
    """
    printer_name: str = EditorConstants.DEFAULT_PRINTER
    copies: int = 1
    page_range: str = ""
    duplex: bool = EditorConstants.DEFAULT_DUPLEX_MODE
    orientation: Orientation = Orientation.PORTRAIT
    page_size: int = EditorConstants.DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if isinstance(self.orientation, str):
            self.orientation = Orientation(self.orientation)
        if self.copies < 1:
            raise ValueError(f"Copies must be at least 1, got {self.copies}")
        if self.page_size < 1:
            raise ValueError(f"Page size must be positive, got {self.page_size}")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["orientation"] = self.orientation.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrintSettings":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class PrintPreview:
    preview_text: str
    page_numbers: List[int]

    @property
    def page_count(self) -> int:
        return len(self.page_numbers)


class PrintManager:
    """Builds previews and print jobs from document text."""

    def select(self, text: str, settings: PrintSettings) -> List[tuple[int, str]]:
        """Return ``(page_number, page_text)`` for the pages to print, 1-based."""
        pages = paginate(text, settings.page_size)
        return [(i + 1, pages[i]) for i in parse_page_range(settings.page_range, len(pages))]

    def preview(self, text: str, settings: PrintSettings) -> PrintPreview:
        selected = self.select(text, settings)
        lines = [
            EditorConstants.PREVIEW_HEADER,
            f"Printer: {settings.printer_name}",
            f"Orientation: {settings.orientation.value}",
        ]
        for number, page in selected:
            lines.append(f"--- Page {number} ---")
            lines.append(page)
        lines.append(EditorConstants.PREVIEW_FOOTER)
        return PrintPreview("\n".join(lines), [number for number, _ in selected])

    def print_job(self, text: str, settings: PrintSettings) -> List[str]:
        """Run the print loop and return the lines it emits.

        Each copy prints every selected page in order. With duplex on, each
        printed page is followed by an announcement for its back side; the
        announcement does not use up a page from the selection.
        """
        selected = self.select(text, settings)
        output = [EditorConstants.PRINT_HEADER.format(settings.printer_name)]
        for _ in range(settings.copies):
            for number, page in selected:
                output.append(page)
                if settings.duplex:
                    output.append(EditorConstants.BACK_PAGE_ANNOUNCEMENT.format(number))
        output.append(EditorConstants.PRINT_FOOTER)
        logger.info(
            f"Printed {len(selected)} page(s) x {settings.copies} on {settings.printer_name}"
        )
        return output
