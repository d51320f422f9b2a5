"""Per-line classification of SubRip subtitle text.

WHY: Auto-generated .srt files interleave caption text with cue numbers,
timing lines and blank separators. The reflow engine only wants the
caption text, so every raw line is tagged first.

HOW: The line is trimmed, then checked in order: blank, leading
HH:MM:SS,mmm timestamp, all-digit cue index, otherwise content.

RULES:
- Pure function of the line text; position and prior lines are ignored
- Only ASCII digits count (a line of "²" is content, not an index)
- Anything unrecognized is CONTENT: dropping dialogue is worse than
  keeping a stray metadata line
"""

from __future__ import annotations

import re

from cleansrt.core.model import LineKind

TIMESTAMP_RE = re.compile(r"^[0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}")
INDEX_RE = re.compile(r"^[0-9]+$")


def classify(line: str) -> LineKind:
    """Tag a raw subtitle line as blank, index, timestamp or content.

    A timing line such as ``00:00:01,000 --> 00:00:04,000`` is matched on
    its leading timestamp only and discarded as a whole.
    """
    trimmed = line.strip()
    if not trimmed:
        return LineKind.BLANK
    if TIMESTAMP_RE.match(trimmed):
        return LineKind.TIMESTAMP
    if INDEX_RE.match(trimmed):
        return LineKind.INDEX
    return LineKind.CONTENT


def is_content(line: str) -> bool:
    return classify(line) is LineKind.CONTENT
