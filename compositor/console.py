"""Console presentation of documents, tokens and errors."""

from typing import List, Optional

import blessed

from .editor import Editor
from .scanner import HighlightToken, ScanError
from .traversal import walk
from .units import Letter, TextUnit, Word


class ConsoleInterface:
    """Prints editor state to the terminal.

    Highlighted words and letters are shown in reverse video and the letter
    under the cursor is underlined.
    """

    def __init__(self, editor: Editor, terminal: Optional[blessed.Terminal] = None):
        self.editor = editor
        self.term = terminal or blessed.Terminal()

    def render_text(self, root: TextUnit) -> str:
        """Return the text of ``root`` with highlight and cursor attributes."""
        text = root.text()
        reverse = [False] * len(text)
        under = [False] * len(text)
        for unit, start in walk(root):
            if isinstance(unit, Word) and unit.highlighted:
                for i in range(start, start + len(unit.text())):
                    reverse[i] = True
            elif isinstance(unit, Letter):
                if unit.highlighted:
                    reverse[start] = True
                if unit.has_cursor:
                    under[start] = True

        out = []
        active = (False, False)
        for i, ch in enumerate(text):
            attrs = (reverse[i], under[i])
            if attrs != active:
                out.append(self.term.normal)
                if attrs[0]:
                    out.append(self.term.reverse)
                if attrs[1]:
                    out.append(self.term.underline)
                active = attrs
            out.append(ch)
        if active != (False, False):
            out.append(self.term.normal)
        return ''.join(out)

    def format_docs(self) -> List[str]:
        lines = ["=== Open Documents ==="]
        for doc in self.editor.documents.documents():
            marker = " [ACTIVE]" if doc is self.editor.current else ""
            modified = " *" if doc.modified else ""
            lines.append(f" - {doc.name}{modified}{marker}")
        lines.append("======================")
        return lines

    def format_document(self) -> List[str]:
        doc = self.editor.current
        if doc is None:
            return ["--- No Active ---"]
        return [
            f"--- {doc.name} ---",
            self.render_text(doc.root),
            "-------------------",
        ]

    def format_tokens(self, tokens: List[HighlightToken]) -> List[str]:
        return ["=== Tokens ==="] + [str(t) for t in tokens] + ["=============="]

    def format_errors(self, errors: List[ScanError]) -> List[str]:
        body = [str(e) for e in errors] or ["No errors"]
        return ["=== Errors ==="] + body + ["=============="]

    def show(self, lines: List[str]) -> None:
        for line in lines:
            print(line)

    def show_docs(self) -> None:
        self.show(self.format_docs())

    def show_document(self) -> None:
        self.show(self.format_document())

    def show_tokens(self, tokens: List[HighlightToken]) -> None:
        self.show(self.format_tokens(tokens))

    def show_errors(self, errors: List[ScanError]) -> None:
        self.show(self.format_errors(errors))
