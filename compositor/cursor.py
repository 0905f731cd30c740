"""Cursor and highlight marks addressed by unit id.

Lookups that find nothing are not errors: the functions return ``False``
and leave the tree as it was (apart from the cursor being cleared by a
cursor move).
"""

from typing import Optional

from .tracing import trace
from .traversal import traverse
from .units import Letter, TextUnit, Word


def highlight(root: TextUnit, unit_id: int) -> bool:
    """Mark the Word or Letter with ``unit_id`` as highlighted.

    Highlights accumulate; nothing else is cleared.

    Returns:
        True if a Word or Letter was marked.
    """
    for unit in traverse(root):
        if unit.id == unit_id and isinstance(unit, (Word, Letter)):
            unit.highlighted = True
            trace("highlight", unit_id=unit_id)
            return True
    return False


def clear_highlights(root: TextUnit) -> int:
    """Remove every highlight mark and return how many were set."""
    cleared = 0
    for unit in traverse(root):
        if isinstance(unit, (Word, Letter)) and unit.highlighted:
            unit.highlighted = False
            cleared += 1
    return cleared


def move_cursor_to(root: TextUnit, unit_id: int) -> bool:
    """Put the cursor on the Letter with ``unit_id``.

    The cursor flag is first cleared on every Letter, so at most one Letter
    carries it afterwards. If ``unit_id`` is not a Letter the cursor stays
    unset.

    Returns:
        True if a Letter now has the cursor.
    """
    target: Optional[Letter] = None
    for unit in traverse(root):
        if isinstance(unit, Letter):
            unit.has_cursor = False
            if unit.id == unit_id:
                target = unit
    if target is None:
        return False
    target.has_cursor = True
    trace("move_cursor", unit_id=unit_id)
    return True


def cursor_letter(root: TextUnit) -> Optional[Letter]:
    for unit in traverse(root):
        if isinstance(unit, Letter) and unit.has_cursor:
            return unit
    return None


class Cursor:
    """The editor's cursor: remembers which Letter id it points at."""

    def __init__(self):
        self.element_id: Optional[int] = None

    def move_to(self, root: TextUnit, unit_id: int) -> bool:
        if move_cursor_to(root, unit_id):
            self.element_id = unit_id
            return True
        self.element_id = None
        return False

    def reset(self, root: Optional[TextUnit] = None) -> None:
        self.element_id = None
        if root is not None:
            for unit in traverse(root):
                if isinstance(unit, Letter):
                    unit.has_cursor = False

    def sync(self, root: TextUnit) -> None:
        """Forget the position if its Letter has left ``root``."""
        if self.element_id is not None and cursor_letter(root) is None:
            self.element_id = None
