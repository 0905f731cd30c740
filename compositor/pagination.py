"""Split document text into fixed-size pages and select pages by range.

Pages are plain character chunks of the synthesized document text; they
feed print preview, the print loop and PDF export.
"""

from typing import List

from .tracing import trace


def paginate(full_text: str, page_size: int) -> List[str]:
    """Split ``full_text`` into consecutive chunks of ``page_size`` characters.

    The last chunk holds whatever remains (1..page_size characters). Empty
    text yields no pages.

    Raises:
        ValueError: If ``page_size`` is less than 1.
    """
    if page_size < 1:
        raise ValueError(f"Page size must be positive, got {page_size}")
    pages = [full_text[i:i + page_size] for i in range(0, len(full_text), page_size)]
    trace("paginate", page_size=page_size, pages=len(pages))
    return pages


def _parse_page_number(token: str) -> int:
    # int() accepts surrounding whitespace and a sign; only plain digits count.
    token = token.strip()
    if not token.isdigit():
        raise ValueError(f"Invalid page number: {token!r}")
    return int(token)


def parse_page_range(range_text: str, page_count: int) -> List[int]:
    """Resolve a page range selector into 0-based page indices.

    ``range_text`` is a comma-separated list of 1-based page numbers and
    inclusive ``start-end`` ranges, e.g. ``"1,3-5,2"``. Indices come out in
    the order the tokens are written and are not deduplicated. Tokens that
    do not parse, pages past ``page_count`` and reversed ranges are
    skipped. A blank selector selects every page.
    """
    if not range_text or not range_text.strip():
        return list(range(page_count))

    indices: List[int] = []
    for token in range_text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            if "-" in token:
                start_text, end_text = token.split("-", 1)
                start = _parse_page_number(start_text)
                end = _parse_page_number(end_text)
            else:
                start = end = _parse_page_number(token)
        except ValueError:
            continue
        for number in range(start, end + 1):
            if 1 <= number <= page_count:
                indices.append(number - 1)
    return indices


def select_pages(pages: List[str], range_text: str) -> List[str]:
    """Return the pages picked by ``range_text`` (see :func:`parse_page_range`)."""
    return [pages[i] for i in parse_page_range(range_text, len(pages))]
