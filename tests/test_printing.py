"""Tests for print settings, preview and the print loop."""

import pytest

from compositor.printing import Orientation, PrintManager, PrintSettings


def test_default_settings():
    settings = PrintSettings()
    assert settings.printer_name == "DefaultPrinter"
    assert settings.copies == 1
    assert settings.page_range == ""
    assert settings.duplex is False
    assert settings.orientation == Orientation.PORTRAIT


def test_settings_validation():
    with pytest.raises(ValueError):
        PrintSettings(copies=0)
    with pytest.raises(ValueError):
        PrintSettings(page_size=0)
    with pytest.raises(ValueError):
        PrintSettings(orientation="sideways")


def test_settings_dict_round_trip_ignores_unknown_keys():
    settings = PrintSettings(printer_name="Lab", copies=2, orientation=Orientation.LANDSCAPE)
    data = settings.to_dict()
    assert data["orientation"] == "landscape"
    data["future_option"] = True
    assert PrintSettings.from_dict(data) == settings


def test_preview_echoes_printer_and_orientation():
    settings = PrintSettings(printer_name="Office", orientation="landscape", page_size=4)
    preview = PrintManager().preview("abcdefghij", settings)
    lines = preview.preview_text.split("\n")
    assert lines[0] == "--- Print Preview ---"
    assert "Printer: Office" in lines
    assert "Orientation: landscape" in lines
    assert lines[-1] == "----------------------"
    assert preview.page_numbers == [1, 2, 3]


def test_preview_respects_page_range():
    settings = PrintSettings(page_size=3, page_range="3,1")
    preview = PrintManager().preview("abcdefg", settings)
    assert preview.page_numbers == [3, 1]
    text = preview.preview_text
    assert text.index("--- Page 3 ---") < text.index("--- Page 1 ---")
    assert "\ng\n" in text
    assert preview.page_count == 2


def test_print_job_simplex():
    settings = PrintSettings(printer_name="P", page_size=3)
    output = PrintManager().print_job("abcdefg", settings)
    assert output == ["=== Printing on P ===", "abc", "def", "g", "=== Done ==="]


def test_print_job_duplex_announces_back_pages():
    settings = PrintSettings(printer_name="P", page_size=3, page_range="2,1", duplex=True)
    output = PrintManager().print_job("abcdefg", settings)
    assert output == [
        "=== Printing on P ===",
        "def",
        "[back of page 2]",
        "abc",
        "[back of page 1]",
        "=== Done ===",
    ]


def test_print_job_copies_repeat_selection():
    settings = PrintSettings(printer_name="P", page_size=2, copies=2, page_range="1")
    output = PrintManager().print_job("abcd", settings)
    assert output[1:-1] == ["ab", "ab"]


def test_print_job_empty_document():
    output = PrintManager().print_job("", PrintSettings(printer_name="P"))
    assert output == ["=== Printing on P ===", "=== Done ==="]
