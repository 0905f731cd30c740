"""Depth-first traversal over the document tree.

All tree-wide operations iterate through :func:`traverse` (or
:func:`walk`, which yields the same sequence together with offsets), so
every search, highlight, validation and count sees nodes in one order:
parent before children, siblings left to right.
"""

from collections import Counter
from typing import Generator, Iterator, List, Optional, Tuple

from .units import Letter, TextUnit, UnitKind, Word


def _walk(unit: TextUnit, offset: int) -> Generator[Tuple[TextUnit, int], None, int]:
    # Returns the offset just past this unit's text.
    yield unit, offset
    if isinstance(unit, Letter):
        return offset + 1
    position = offset
    for index, child in enumerate(unit.children):
        if index:
            position += len(unit.separator)
        position = yield from _walk(child, position)
    return position


def walk(root: TextUnit) -> Iterator[Tuple[TextUnit, int]]:
    """Yield ``(unit, start)`` pairs in pre-order.

    ``start`` is the offset of the unit's text within ``root.text()``,
    computed from the join rules of the enclosing units. Offsets are never
    stored on the units, so they are always current for the tree as it is
    when the walk runs.
    """
    yield from _walk(root, 0)


def traverse(root: TextUnit) -> Iterator[TextUnit]:
    """Yield every unit under ``root`` (inclusive) exactly once, pre-order.

    Each call returns an independent generator; walks do not share state.
    """
    for unit, _ in walk(root):
        yield unit


def find_by_id(root: TextUnit, unit_id: int) -> Optional[TextUnit]:
    for unit in traverse(root):
        if unit.id == unit_id:
            return unit
    return None


def words(root: TextUnit) -> Iterator[Word]:
    for unit in traverse(root):
        if isinstance(unit, Word):
            yield unit


def count_units(root: TextUnit) -> Counter:
    """Count units by kind in a single pass."""
    return Counter(unit.kind for unit in traverse(root))


def count_words(root: TextUnit) -> int:
    return count_units(root)[UnitKind.WORD]


def node_listing(root: TextUnit) -> List[Tuple[int, str, str]]:
    """Return ``(id, kind, text)`` for every unit, in traversal order."""
    return [(unit.id, unit.kind.value, unit.text()) for unit in traverse(root)]
