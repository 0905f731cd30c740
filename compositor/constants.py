"""Constants and configuration for the compositor editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Document structure
    SENTENCE_TERMINATORS = ".!?"
    SENTENCE_SEPARATOR = " "  # Between words of a sentence
    PARAGRAPH_SEPARATOR = " "  # Between sentences of a paragraph
    DOCUMENT_SEPARATOR = "\n\n"  # Blank line between paragraphs

    # Scanner
    UNEXPECTED_SYMBOLS = frozenset("@")
    OPEN_DELIMITER = "("
    CLOSE_DELIMITER = ")"

    # Pagination
    DEFAULT_PAGE_SIZE = 1000  # Characters per page
    PDF_LINE_WIDTH = 85  # Characters per PDF line (8.5" at 10 cpi)
    PDF_LINES_PER_PAGE = 54

    # Printing defaults
    DEFAULT_PRINTER = "DefaultPrinter"
    DEFAULT_DUPLEX_MODE = False
    PREVIEW_HEADER = "--- Print Preview ---"
    PREVIEW_FOOTER = "----------------------"
    PRINT_HEADER = "=== Printing on {} ==="
    PRINT_FOOTER = "=== Done ==="
    BACK_PAGE_ANNOUNCEMENT = "[back of page {}]"

    # File operations
    DEFAULT_EXTENSION = ".txt"
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
