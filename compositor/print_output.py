"""Handle actual printing and PDF file output."""

import logging
import os
import shutil
import subprocess
import tempfile
from typing import List, Optional

from .pdf_generator import PDFGenerator
from .printing import Orientation

logger = logging.getLogger(__name__)


class PrintOutput:
    """Handles printing to printers and generating PDF files."""

    def __init__(self, pdf_generator: Optional[PDFGenerator] = None):
        """Initialize print output handler."""
        self.lpr_available = shutil.which("lpr") is not None
        self.pdf_generator = pdf_generator or PDFGenerator()

    def print_to_printer(self, pages: List[str], printer: str,
                         duplex: bool = False, copies: int = 1,
                         orientation: Orientation = Orientation.PORTRAIT) -> tuple[bool, str]:
        """Submit print job to CUPS printer.

        Args:
            pages: Selected page strings.
            printer: Name of the printer to use.
            duplex: Whether to print double-sided.
            copies: Number of copies.
            orientation: Page orientation passed to CUPS.

        Returns:
            Tuple of (success, message). On success the message is the
            unprintable-character warning, or empty.
        """
        if not self.lpr_available:
            return False, "Printing is not available (lpr command not found)"

        if not printer:
            return False, "No printer specified"

        pdf_filename = None
        try:
            pdf_content = self.pdf_generator.generate_pdf(pages)

            with tempfile.NamedTemporaryFile(mode='wb', suffix='.pdf',
                                             delete=False) as pdf_file:
                pdf_filename = pdf_file.name
                pdf_file.write(pdf_content)

            cmd = ['lpr', '-P', printer]
            if copies > 1:
                cmd.extend(['-#', str(copies)])
            if duplex:
                cmd.extend(['-o', 'sides=two-sided-long-edge'])
            if orientation == Orientation.LANDSCAPE:
                cmd.extend(['-o', 'landscape'])
            cmd.append(pdf_filename)

            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=10
            )

            if result.returncode != 0:
                error_msg = result.stderr.strip() if result.stderr else "Print command failed"
                logger.warning(f"lpr failed for {printer}: {error_msg}")
                return False, f"Print failed: {error_msg}"

            # Job is queued; pass on any characters that were printed as '?'
            return True, self.pdf_generator.get_unprintable_warning() or ""

        except subprocess.TimeoutExpired:
            return False, "Print command timed out"
        except (OSError, subprocess.SubprocessError) as e:
            return False, f"Print error: {str(e)}"
        finally:
            if pdf_filename is not None:
                try:
                    os.unlink(pdf_filename)
                except OSError as e:
                    logger.warning(f"Could not remove temporary PDF {pdf_filename}: {e}")

    def save_to_file(self, pages: List[str], filename: str) -> tuple[bool, str]:
        """Write the selected pages to a PDF file instead of a printer.

        Args:
            pages: Page strings to render.
            filename: Output PDF filename; ``.pdf`` is appended if missing.

        Returns:
            Tuple of (success, message). On failure the message is the
            error; on success it is the unprintable-character warning, or
            empty.
        """
        if not filename.endswith('.pdf'):
            filename += '.pdf'

        valid, error = self.validate_output_path(filename)
        if not valid:
            return False, error

        try:
            pdf_content = self.pdf_generator.generate_pdf(pages)
            with open(filename, 'wb') as f:
                f.write(pdf_content)
        except OSError as e:
            logger.warning(f"Could not write {filename}: {e}")
            return False, f"Save error: {str(e)}"

        logger.info(f"Wrote {len(pages)} page(s) to {filename}")
        return True, self.pdf_generator.get_unprintable_warning() or ""

    def validate_output_path(self, filename: str) -> tuple[bool, str]:
        """Check that ``filename`` can be created or overwritten.

        Returns:
            Tuple of (is_valid, error_message).
        """
        directory = os.path.dirname(filename) or '.'
        if not os.path.isdir(directory):
            return False, f"Directory does not exist: {directory}"
        if not os.access(directory, os.W_OK):
            return False, f"Directory is not writable: {directory}"
        if os.path.isdir(filename):
            return False, f"Output path is a directory: {filename}"
        if os.path.exists(filename) and not os.access(filename, os.W_OK):
            return False, f"File exists and is not writable: {filename}"
        return True, ""
