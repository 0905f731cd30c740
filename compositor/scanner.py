"""Syntax highlighting and validation over the document tree.

A scan makes one traversal of the tree, classifying each Word into a
:class:`HighlightToken` and checking each Letter against the denylist,
then a second pass over the synthesized text checks that parentheses
balance. Problems are collected as :class:`ScanError` values; a scan never
stops at the first one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .constants import EditorConstants
from .tracing import trace
from .traversal import traverse, walk
from .units import Letter, TextUnit, Word


class TokenType(Enum):
    NUMBER = "NUMBER"
    CONSTANT = "CONSTANT"
    IDENTIFIER = "IDENTIFIER"
    MATCH = "MATCH"


class ErrorKind(Enum):
    STRUCTURAL = "structural"  # Unbalanced delimiters
    LEXICAL = "lexical"  # Unexpected symbols, empty words


@dataclass(frozen=True)
class HighlightToken:
    element_id: int
    type: TokenType
    start: int
    length: int

    def __str__(self) -> str:
        return f"Token[{self.type.value}] @({self.start},{self.length})"


@dataclass(frozen=True)
class ScanError:
    position: int
    message: str
    kind: ErrorKind = ErrorKind.LEXICAL

    def __str__(self) -> str:
        return f"Error @ {self.position}: {self.message}"


@dataclass
class ScanResult:
    tokens: List[HighlightToken] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)


def classify_word(value: str) -> Optional[TokenType]:
    """Classify a word's text, or return None for empty/blank words."""
    if not value or value.isspace():
        return None
    if all(ch.isdigit() for ch in value):
        return TokenType.NUMBER
    if all(ch.isupper() for ch in value):
        return TokenType.CONSTANT
    return TokenType.IDENTIFIER


def check_delimiters(text: str) -> List[ScanError]:
    """Report unbalanced parentheses in ``text``.

    Unmatched closers are reported as they are met. Openers still pending
    at the end are reported last-opened first.
    """
    errors: List[ScanError] = []
    stack: List[int] = []
    for i, ch in enumerate(text):
        if ch == EditorConstants.OPEN_DELIMITER:
            stack.append(i)
        elif ch == EditorConstants.CLOSE_DELIMITER:
            if stack:
                stack.pop()
            else:
                errors.append(ScanError(i, "Unmatched ')'", ErrorKind.STRUCTURAL))
    while stack:
        errors.append(ScanError(stack.pop(), "Unmatched '('", ErrorKind.STRUCTURAL))
    return errors


class Scanner:
    """Highlighter and validator.

    The scanner keeps no state between calls; every :meth:`scan` builds a
    new :class:`ScanResult`.
    """

    def __init__(self, unexpected_symbols=EditorConstants.UNEXPECTED_SYMBOLS):
        self.unexpected_symbols = frozenset(unexpected_symbols)

    def scan(self, root: TextUnit) -> ScanResult:
        result = ScanResult()
        for unit, start in walk(root):
            if isinstance(unit, Word):
                self._process_word(unit, start, result)
            elif isinstance(unit, Letter):
                self._process_letter(unit, start, result)
        result.errors.extend(check_delimiters(root.text()))
        trace("scan", root_id=root.id, tokens=len(result.tokens), errors=len(result.errors))
        return result

    def _process_word(self, word: Word, start: int, result: ScanResult) -> None:
        value = word.text()
        token_type = classify_word(value)
        if token_type is None:
            result.errors.append(ScanError(start, "Empty word", ErrorKind.LEXICAL))
            return
        result.tokens.append(HighlightToken(word.id, token_type, start, len(value)))

    def _process_letter(self, letter: Letter, start: int, result: ScanResult) -> None:
        if letter.value in self.unexpected_symbols:
            result.errors.append(
                ScanError(start, f"Unexpected symbol '{letter.value}'", ErrorKind.LEXICAL)
            )

    def highlight(self, root: TextUnit) -> List[HighlightToken]:
        return self.scan(root).tokens

    def validate(self, root: TextUnit) -> List[ScanError]:
        return self.scan(root).errors


def find_matches(root: TextUnit, pattern: str) -> List[HighlightToken]:
    """Find words containing ``pattern``, ignoring case.

    Offsets follow a simplified model: every word is assumed to be followed
    by exactly one separator character, whatever actually joins it to the
    next word. Tokens cover the whole matching word.
    """
    tokens: List[HighlightToken] = []
    if not pattern:
        return tokens
    needle = pattern.casefold()
    offset = 0
    for unit in traverse(root):
        if not isinstance(unit, Word):
            continue
        value = unit.text()
        if needle in value.casefold():
            tokens.append(HighlightToken(unit.id, TokenType.MATCH, offset, len(value)))
        offset += len(value) + 1
    trace("find_matches", pattern=pattern, matches=len(tokens))
    return tokens


def highlight_tokens(root: TextUnit) -> List[HighlightToken]:
    return Scanner().highlight(root)


def validate(root: TextUnit) -> List[ScanError]:
    return Scanner().validate(root)
