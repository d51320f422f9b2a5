"""Shared test fixtures for the cleansrt test suite.

WHY: Several test modules need the same realistic auto-caption sample:
cue numbers, timing lines, scrolling repeats and a ">>" speaker change.
Centralizing it here keeps the expected output in one place.

HOW: AUTO_CAPTION_LINES mirrors what yt-dlp writes for a YouTube video
with auto-generated English captions (after --convert-subs srt).

RULES:
- Lines carry no line terminators, like the sources return them
- AUTO_CAPTION_TEXT is the expected flat, unwrapped output
"""

from typing import List

import pytest

AUTO_CAPTION_LINES: List[str] = [
    "1",
    "00:00:00,160 --> 00:00:02,470",
    "welcome back to the channel",
    "",
    "2",
    "00:00:02,470 --> 00:00:02,480",
    "welcome back to the channel",
    "today we look at sourdough.",
    "",
    "3",
    "00:00:02,480 --> 00:00:05,110",
    "today we look at sourdough.",
    ">> is it hard?",
    "",
    "4",
    "00:00:05,110 --> 00:00:07,000",
    ">> is it hard?",
    ">> Not really! You need flour",
    "",
    "5",
    "00:00:07,000 --> 00:00:09,300",
    "and water",
    "",
]

AUTO_CAPTION_TEXT = (
    "welcome back to the channel today we look at sourdough.\n"
    "\n"
    "is it hard?\n"
    "\n"
    "Not really!\n"
    "\n"
    "You need flour and water\n"
)


@pytest.fixture
def auto_caption_lines():
    """Raw SubRip lines of a short auto-captioned video."""
    return list(AUTO_CAPTION_LINES)


@pytest.fixture
def auto_caption_srt(tmp_path):
    """The auto-caption sample written to a .srt file (with BOM, CRLF)."""
    path = tmp_path / "Sourdough basics.srt"
    path.write_bytes(("\ufeff" + "\r\n".join(AUTO_CAPTION_LINES) + "\r\n").encode("utf-8"))
    return path
