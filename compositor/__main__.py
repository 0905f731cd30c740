"""Compositor CLI entry point.

Allows running via `python -m compositor` and provides the console script
defined in `pyproject.toml`.

Usage:
    compositor [FILE] [--highlight] [--validate] [--find PATTERN]
               [--preview RANGE] [--export FORMAT PATH] [--print-to FILE]
    compositor --version
"""

from __future__ import annotations

import importlib.metadata
import logging
import sys
from typing import List, Optional

from .console import ConsoleInterface
from .editor import Editor
from .export import UnsupportedFormatError
from .printing import PrintSettings


def get_version_string() -> str:
    try:
        return importlib.metadata.version("compositor")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def _take_value(args: List[str], flag: str, count: int = 1) -> Optional[List[str]]:
    """Remove ``flag`` and the ``count`` values after it from ``args``."""
    if flag not in args:
        return None
    i = args.index(flag)
    values = args[i + 1:i + 1 + count]
    if len(values) < count:
        raise SystemExit(f"{flag} needs {count} argument(s)")
    del args[i:i + 1 + count]
    return values


def main(argv: Optional[List[str]] = None) -> int:
    # Very small arg parsing: flags with values first, then switches, then a filename
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    find = _take_value(args, "--find")
    preview = _take_value(args, "--preview")
    export = _take_value(args, "--export", 2)
    print_to = _take_value(args, "--print-to")
    show_tokens = "--highlight" in args
    show_errors = "--validate" in args
    args = [a for a in args if a not in ("--highlight", "--validate")]

    editor = Editor()
    ui = ConsoleInterface(editor)
    if args:
        try:
            editor.open_document(args[0])
        except OSError as e:
            print(f"Error loading file: {e}", file=sys.stderr)
            return 1
    else:
        editor.new_document("Untitled")
        editor.insert_text(sys.stdin.read())

    ui.show_docs()
    ui.show_document()

    if find:
        for token in editor.find(find[0]):
            editor.highlight(token.element_id)
        ui.show_document()
    if show_tokens:
        ui.show_tokens(editor.highlight_tokens())
    if show_errors:
        ui.show_errors(editor.validate())
    if preview is not None:
        settings = editor.print_settings()
        settings.page_range = preview[0]
        print(editor.preview(settings).preview_text)
    if export:
        try:
            written = editor.export(export[0], export[1])
        except UnsupportedFormatError as e:
            print(str(e), file=sys.stderr)
            return 2
        print(f"Exported to {written}")
    if print_to:
        success, message = editor.print_to_file(print_to[0])
        if not success:
            print(f"Print failed: {message}", file=sys.stderr)
            return 1
        if message:
            print(message, file=sys.stderr)
        print(f"Printed to {print_to[0]}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
