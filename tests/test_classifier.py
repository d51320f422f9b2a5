"""Unit tests for the SubRip line classifier.

WHY: A misclassified line either leaks timing metadata into the
transcript or drops real dialogue. Both are visible to every reader.

HOW: Table-driven checks for each LineKind plus the edge cases that
auto-captions actually produce (whitespace-only lines, numbers inside
dialogue, timing lines with trailing position tags).
"""

import pytest

from cleansrt.core.classifier import classify, is_content
from cleansrt.core.model import LineKind


class TestClassify:
    """classify() tags each raw line."""

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t \r"])
    def test_blank(self, line):
        assert classify(line) is LineKind.BLANK

    @pytest.mark.parametrize("line", [
        "00:00:01,000 --> 00:00:04,000",
        "  01:02:03,456 --> 01:02:05,000  ",
        "00:00:01,000 --> 00:00:04,000 align:start position:0%",
        "12:34:56,789",
    ])
    def test_timestamp(self, line):
        assert classify(line) is LineKind.TIMESTAMP

    @pytest.mark.parametrize("line", ["1", "42", " 1337 ", "0007"])
    def test_index(self, line):
        assert classify(line) is LineKind.INDEX

    @pytest.mark.parametrize("line", [
        "Hello world",
        ">> Thanks for watching.",
        "I have 3 cats",
        "1 2 3",
        "-1",
        "00:00:01.000 --> 00:00:04.000",  # WebVTT uses a dot, not a comma
        "0:00:01,000 --> 0:00:04,000",
        "at 10:30 we start",
        "²",
    ])
    def test_content(self, line):
        assert classify(line) is LineKind.CONTENT

    def test_speaker_marker_only_is_content(self):
        """">>" is content here; the reflow engine drops it later."""
        assert classify(">>") is LineKind.CONTENT

    def test_pure_function_of_text(self):
        lines = ["1", "Hello", "", "00:00:00,000 --> 00:00:01,000", "Hello"]
        first = [classify(line) for line in lines]
        second = [classify(line) for line in reversed(lines)]
        assert first == list(reversed(second))


class TestIsContent:

    def test_only_content_lines(self):
        assert is_content("Hello")
        assert not is_content("12")
        assert not is_content("")
        assert not is_content("00:00:00,000 --> 00:00:01,000")
