"""Line kinds and reflow options shared by the cleaning pipeline.

WHY: The classifier and the reflow engine need a common vocabulary for
what a raw subtitle line is, and the reflow engine needs one explicit
options object instead of several near-identical code paths for the
different output styles (flat sentences, paragraphs, wrapped lines).

HOW: LineKind is a small Enum. ReflowOptions is a plain dataclass whose
validate() method is called once before any line is processed.

RULES:
- wrap_width == 0 means "no wrapping"; negative widths are rejected
- Options are never clamped or silently corrected
- No module-level mutable state; every call receives its options
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(Enum):
    """Classification of one raw line of SubRip text."""

    BLANK = "blank"
    INDEX = "index"
    TIMESTAMP = "timestamp"
    CONTENT = "content"


class InvalidOptionsError(ValueError):
    """Raised when ReflowOptions holds a value the engine cannot honor.

    WHY: A negative wrap width has no meaning. Failing before processing
    gives the caller a clear message instead of odd output.

    HOW: Raised by ReflowOptions.validate().

    RULES:
    - Message names the offending field and value
    """


@dataclass
class ReflowOptions:
    """Configuration for reflow_lines().

    Attributes:
        group_by_blank_line: Blank source lines end the current paragraph;
            output blocks are paragraphs instead of sentences.
        wrap_width: Maximum characters per output line. 0 disables wrapping.
        strip_speaker_marker: Remove a leading ">>" from each caption line.
        split_sentences: Segment the stream (or each paragraph) at
            ".", "!" and "?" followed by whitespace. None means "yes in
            flat mode, no in paragraph mode".
    """

    group_by_blank_line: bool = False
    wrap_width: int = 0
    strip_speaker_marker: bool = True
    split_sentences: Optional[bool] = None

    def sentences_enabled(self) -> bool:
        """Resolve split_sentences against the grouping mode."""
        if self.split_sentences is None:
            return not self.group_by_blank_line
        return self.split_sentences

    def validate(self) -> None:
        if isinstance(self.wrap_width, bool) or not isinstance(self.wrap_width, int):
            raise InvalidOptionsError(
                "wrap_width must be an integer, got {!r}".format(self.wrap_width)
            )
        if self.wrap_width < 0:
            raise InvalidOptionsError(
                "wrap_width must be >= 0, got {}".format(self.wrap_width)
            )
        if self.split_sentences is not None and not isinstance(self.split_sentences, bool):
            raise InvalidOptionsError(
                "split_sentences must be True, False or None, got {!r}".format(
                    self.split_sentences
                )
            )
