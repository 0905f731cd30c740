"""Composite text units: Root > Paragraph > Sentence > Word > Letter.

Every unit carries a process-unique ``id`` that is assigned once at
construction and never reused. Composite units own their children
exclusively; a unit can be attached to at most one parent at a time.
Text is synthesized from the children on every call to ``text()`` so it
always reflects the current tree.
"""

import itertools
from enum import Enum
from typing import List, Optional

from .constants import EditorConstants

_id_counter = itertools.count(1)


def next_unit_id() -> int:
    """Return a fresh unit id, unique for the lifetime of the process."""
    return next(_id_counter)


class UnitKind(Enum):
    """Variants of the composite tree, outermost first."""
    ROOT = "Root"
    PARAGRAPH = "Paragraph"
    SENTENCE = "Sentence"
    WORD = "Word"
    LETTER = "Letter"


class TextUnit:
    """Base class shared by every node of the document tree."""

    kind: UnitKind
    separator: str = ""
    child_type: Optional[type] = None

    def __init__(self):
        self.id: int = next_unit_id()
        self.children: List["TextUnit"] = []
        self.parent: Optional["TextUnit"] = None

    def text(self) -> str:
        return self.separator.join(child.text() for child in self.children)

    def add(self, child: "TextUnit") -> "TextUnit":
        """Append ``child`` to this unit and take ownership of it.

        Raises:
            TypeError: If ``child`` is not the variant this unit holds.
            ValueError: If ``child`` already belongs to a parent.
        """
        if self.child_type is None or not isinstance(child, self.child_type):
            raise TypeError(
                f"{self.kind.value} cannot contain {type(child).__name__}"
            )
        if child.parent is not None:
            raise ValueError(f"Unit {child.id} is already attached to unit {child.parent.id}")
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "TextUnit") -> None:
        """Detach ``child`` from this unit."""
        self.children.remove(child)
        child.parent = None

    def clear(self) -> None:
        """Detach every child."""
        for child in self.children:
            child.parent = None
        self.children = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, text={self.text()!r})"


class Letter(TextUnit):
    """A single character, the only leaf variant."""

    kind = UnitKind.LETTER

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Letter holds exactly one character, got {value!r}")
        super().__init__()
        self.value = value
        self.highlighted = False
        self.has_cursor = False

    def text(self) -> str:
        return self.value


class Word(TextUnit):
    kind = UnitKind.WORD
    child_type = Letter

    def __init__(self, value: str = ""):
        super().__init__()
        self.highlighted = False
        if value:
            self.set_text(value)

    def set_text(self, value: str) -> None:
        """Regenerate this word's letters from ``value``.

        The word keeps its id and its place in the parent sentence; the
        old letters are detached and replaced by new ones.
        """
        self.clear()
        for ch in value:
            self.add(Letter(ch))


class Sentence(TextUnit):
    kind = UnitKind.SENTENCE
    separator = EditorConstants.SENTENCE_SEPARATOR
    child_type = Word


class Paragraph(TextUnit):
    kind = UnitKind.PARAGRAPH
    separator = EditorConstants.PARAGRAPH_SEPARATOR
    child_type = Sentence


class Root(TextUnit):
    kind = UnitKind.ROOT
    separator = EditorConstants.DOCUMENT_SEPARATOR
    child_type = Paragraph
