"""Tests for the editor controller."""

import os
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from compositor.editor import Editor
from compositor.export import UnsupportedFormatError
from compositor.printing import PrintSettings
from compositor.scanner import TokenType
from compositor.settings_persistence import SettingsPersistence
from compositor.traversal import traverse
from compositor.units import Letter, Word


@pytest.fixture
def config_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def editor(config_dir):
    return Editor(persistence=SettingsPersistence(config_dir=config_dir))


def test_operations_without_document(editor):
    assert editor.current is None
    editor.insert_text("ignored")
    assert editor.text() == ""
    assert editor.highlight_tokens() == []
    assert editor.validate() == []
    assert editor.find("x") == []
    assert editor.highlight(1) is False
    assert editor.move_cursor_to(1) is False
    assert editor.print() == []
    assert editor.export("json", "unused.json") is None
    assert editor.save() is None
    assert editor.word_count() == 0


def test_insert_text_appends(editor):
    editor.new_document("Doc1")
    editor.insert_text("HELLO world. This is first document.")
    assert editor.text() == "HELLO world This is first document"
    editor.insert_text(" More")
    assert editor.text() == "HELLO world This is first document More"
    assert editor.current.modified


def test_documents_are_independent(editor):
    editor.new_document("Doc1")
    editor.insert_text("first")
    editor.new_document("Doc2")
    editor.insert_text("SECOND document (demo).")
    assert editor.switch_document("Doc1")
    assert editor.text() == "first"
    assert editor.switch_document("Doc3") is False
    assert editor.text() == "first"


def test_highlight_and_validate_demo(editor):
    editor.new_document("Doc1")
    editor.insert_text("HELLO world. This is first document.")
    tokens = editor.highlight_tokens()
    assert [t.type for t in tokens] == [
        TokenType.CONSTANT,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
    ]
    assert editor.validate() == []

    editor.replace_text("SECOND document (demo")
    assert [e.message for e in editor.validate()] == ["Unmatched '('"]


def test_find_then_highlight(editor):
    editor.new_document("Doc")
    editor.insert_text("apple Banana. pineapple")
    matches = editor.find("APPLE")
    assert len(matches) == 2
    for token in matches:
        assert editor.highlight(token.element_id)
    highlighted = [u.text() for u in traverse(editor.current.root)
                   if isinstance(u, Word) and u.highlighted]
    assert highlighted == ["apple", "pineapple"]
    assert editor.clear_highlights() == 2


def test_cursor_reset_on_text_replacement(editor):
    editor.new_document("Doc")
    editor.insert_text("abc")
    letter = next(u for u in traverse(editor.current.root) if isinstance(u, Letter))
    assert editor.move_cursor_to(letter.id)
    assert editor.cursor.element_id == letter.id
    editor.replace_text("xyz")
    assert editor.cursor.element_id is None


def test_find_replace(editor):
    editor.new_document("Doc")
    editor.insert_text("red car. red")
    editor.current.modified = False
    assert editor.find_replace("red", "blue") == 2
    assert editor.text() == "blue car blue"
    assert editor.current.modified
    assert editor.word_count() == 3


def test_print_uses_and_remembers_settings(editor, config_dir):
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "doc.txt")
        editor.new_document("doc")
        editor.insert_text("abcdefg")
        editor.save(path)

        settings = PrintSettings(printer_name="Lab", page_size=3, page_range="3", duplex=True)
        output = editor.print(settings)
        assert output == ["=== Printing on Lab ===", "g", "[back of page 3]", "=== Done ==="]

        assert editor.print_settings() == settings
        again = Editor(persistence=SettingsPersistence(config_dir=config_dir))
        again.open_document(path)
        assert again.print() == output


def test_preview_defaults(editor):
    editor.new_document("Doc")
    editor.insert_text("short")
    preview = editor.preview()
    assert preview.page_numbers == [1]
    assert "Printer: DefaultPrinter" in preview.preview_text


def test_export_unsupported_format_propagates(editor):
    editor.new_document("Doc")
    with pytest.raises(UnsupportedFormatError):
        editor.export("odt", "out.odt")


def test_export_and_save(editor):
    with tempfile.TemporaryDirectory() as temp_dir:
        editor.new_document("Doc")
        editor.insert_text("Some text")
        out = os.path.join(temp_dir, "doc.pdf")
        assert editor.export("pdf", out) == out
        with open(out, "rb") as f:
            assert f.read().startswith(b"%PDF")


def test_close_document(editor):
    editor.new_document("Doc1")
    editor.new_document("Doc2")
    assert editor.close_document("Doc2")
    assert editor.current.name == "Doc1"
    assert editor.close_document("Doc2") is False


def test_switching_documents_drops_cursor_mark(editor):
    editor.new_document("Doc1")
    editor.insert_text("abc")
    first_root = editor.current.root
    letter = next(u for u in traverse(first_root) if isinstance(u, Letter))
    editor.move_cursor_to(letter.id)

    editor.new_document("Doc2")

    assert editor.cursor.element_id is None
    assert not letter.has_cursor


def test_send_to_printer_passes_selected_pages(editor):
    editor.new_document("Doc")
    editor.insert_text("abcdefg")
    output = Mock()
    output.print_to_printer.return_value = (True, "")
    settings = PrintSettings(printer_name="Lab", page_size=3, page_range="3,1",
                             duplex=True, copies=2)

    assert editor.send_to_printer(settings, output) == (True, "")

    output.print_to_printer.assert_called_once_with(
        ["g", "abc"], "Lab", duplex=True, copies=2, orientation=settings.orientation)


def test_send_to_printer_nothing_selected(editor):
    editor.new_document("Doc")
    editor.insert_text("abc")
    output = Mock()
    success, error = editor.send_to_printer(PrintSettings(page_range="9"), output)
    assert success is False
    assert error == "Nothing to print"
    output.print_to_printer.assert_not_called()


def test_send_to_printer_without_document(editor):
    assert editor.send_to_printer() == (False, "No active document")


def test_find_replace_forgets_cursor_on_rebuilt_word(editor):
    editor.new_document("Doc")
    editor.insert_text("cat dog")
    letters = [u for u in traverse(editor.current.root) if isinstance(u, Letter)]
    editor.move_cursor_to(letters[0].id)

    assert editor.find_replace("cat", "cow") == 1

    assert editor.cursor.element_id is None
    live_ids = {u.id for u in traverse(editor.current.root)}
    assert letters[0].id not in live_ids


def test_find_replace_keeps_cursor_on_untouched_word(editor):
    editor.new_document("Doc")
    editor.insert_text("cat dog")
    letters = [u for u in traverse(editor.current.root) if isinstance(u, Letter)]
    editor.move_cursor_to(letters[-1].id)

    editor.find_replace("cat", "cow")

    assert editor.cursor.element_id == letters[-1].id


def test_print_to_file_writes_selected_pages(editor):
    with tempfile.TemporaryDirectory() as temp_dir:
        editor.new_document("Doc")
        editor.insert_text("abcdefg")
        target = os.path.join(temp_dir, "pages.pdf")
        settings = PrintSettings(page_size=3, page_range="1-2")

        assert editor.print_to_file(target, settings) == (True, "")
        with open(target, "rb") as f:
            assert f.read().startswith(b"%PDF")


def test_print_to_file_checks_directory(editor):
    editor.new_document("Doc")
    editor.insert_text("abc")
    success, message = editor.print_to_file("/nonexistent/directory/out.pdf")
    assert success is False
    assert "Directory does not exist" in message
    assert editor.print_to_file("x.pdf", PrintSettings(page_range="5")) == \
        (False, "Nothing to print")
