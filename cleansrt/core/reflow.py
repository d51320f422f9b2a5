"""Transcript reflow: dedup, paragraph grouping, sentence split, wrapping.

WHY: Auto-captions scroll, so the same caption line is emitted again and
again, and the text arrives in two-to-five word fragments with no
paragraph or sentence structure. Readers want prose. This module turns
the caption lines of an .srt file into blocks of readable text.

HOW: One pass over the raw lines:
  1. classify() each line; timestamps and cue indexes are dropped,
     blank lines become paragraph breaks (paragraph mode only).
  2. Content lines are trimmed, a leading ">>" speaker marker is removed,
     empty results are dropped, and a line identical to the previously
     retained line is suppressed.
  3. Retained lines are joined with single spaces into one stream (flat
     mode) or one string per paragraph.
  4. The flat stream is split into sentences at ". ", "! ", "? ";
     paragraphs are only split when asked to.
  5. Each block is wrapped at word boundaries to the configured width.
  6. Blocks are joined with a blank line; the document ends in "\\n".

RULES:
- Word order is never changed and no word is gained or lost
- Dedup only compares against the immediately preceding retained line;
  a caption repeated after other lines is kept
- Dedup state survives blank lines (scrolling repeats span cue blocks)
- Abbreviations like "Mr." end a sentence; there is no language model here
- Only invalid options raise; malformed input is treated as text
- reflow_lines() is the public entry point for the whole pipeline
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Iterable, List, Optional

from cleansrt.core.classifier import classify
from cleansrt.core.model import LineKind, ReflowOptions

logger = logging.getLogger(__name__)

SPEAKER_MARKER = ">>"

# Whitespace run preceded by terminal punctuation. The punctuation stays
# with the sentence it closes; the whitespace is discarded.
SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+")


def normalize_content(line: str, strip_speaker_marker: bool = True) -> str:
    """Trim a caption line and drop one leading ">>" speaker marker."""
    text = line.strip()
    if strip_speaker_marker and text.startswith(SPEAKER_MARKER):
        text = text[len(SPEAKER_MARKER):].strip()
    return text


class _RepeatFilter:
    """Stateful adjacent-repeat suppression over normalized caption lines.

    accept() returns the normalized text when the line should be kept and
    None when it is empty or repeats the last kept line. Empty lines do
    not touch the state.
    """

    def __init__(self, strip_speaker_marker: bool = True) -> None:
        self.strip_speaker_marker = strip_speaker_marker
        self.last_retained: Optional[str] = None
        self.dropped_empty = 0
        self.dropped_repeat = 0

    def accept(self, line: str) -> Optional[str]:
        text = normalize_content(line, self.strip_speaker_marker)
        if not text:
            self.dropped_empty += 1
            return None
        if text == self.last_retained:
            self.dropped_repeat += 1
            return None
        self.last_retained = text
        return text


def dedupe_lines(lines: Iterable[str], strip_speaker_marker: bool = True) -> List[str]:
    """Normalize caption lines and suppress immediate repeats.

    The input is assumed to be content lines already (no classification is
    done), so running this on its own output returns it unchanged.
    """
    repeat_filter = _RepeatFilter(strip_speaker_marker)
    retained: List[str] = []
    for line in lines:
        text = repeat_filter.accept(line)
        if text is not None:
            retained.append(text)
    return retained


def collect_paragraphs(lines: Iterable[str], options: ReflowOptions) -> List[List[str]]:
    """Classify raw lines and group the retained caption text.

    Flat mode returns at most one group holding every retained line.
    Paragraph mode starts a new group at every blank line. Empty groups
    are never returned.
    """
    repeat_filter = _RepeatFilter(options.strip_speaker_marker)
    kinds: Counter = Counter()
    paragraphs: List[List[str]] = []
    current: List[str] = []

    for line in lines:
        kind = classify(line)
        kinds[kind] += 1
        if kind is LineKind.BLANK:
            if options.group_by_blank_line and current:
                paragraphs.append(current)
                current = []
            continue
        if kind is not LineKind.CONTENT:
            continue
        text = repeat_filter.accept(line)
        if text is not None:
            current.append(text)

    if current:
        paragraphs.append(current)

    logger.debug(
        "Classified lines: %d content, %d timestamp, %d index, %d blank",
        kinds[LineKind.CONTENT],
        kinds[LineKind.TIMESTAMP],
        kinds[LineKind.INDEX],
        kinds[LineKind.BLANK],
    )
    logger.debug(
        "Retained %d lines in %d group(s); dropped %d repeats, %d empty",
        sum(len(p) for p in paragraphs),
        len(paragraphs),
        repeat_filter.dropped_repeat,
        repeat_filter.dropped_empty,
    )
    return paragraphs


def split_sentences(text: str) -> List[str]:
    """Split text after ".", "!" or "?" followed by whitespace.

    Sentences keep their terminal punctuation. Empty pieces are dropped,
    so text without terminal punctuation comes back as a single sentence.
    """
    sentences: List[str] = []
    for piece in SENTENCE_BREAK_RE.split(text):
        piece = piece.strip()
        if piece:
            sentences.append(piece)
    return sentences


def wrap_text(text: str, width: int) -> List[str]:
    """Greedily pack the words of text into lines of at most width chars.

    WHY: Long sentences are hard to read as one line in a plain editor.

    HOW: Words are appended while the line plus one trailing separator
    still fits in width; otherwise the line is flushed first. Text that
    already fits is returned untouched.

    RULES:
    - width == 0 disables wrapping
    - Breaks only between words; a word longer than width gets its own
      line and is never split
    - The final partial line is always flushed
    """
    if width <= 0 or len(text) <= width:
        return [text]

    lines: List[str] = []
    current: List[str] = []
    used = 0
    for word in text.split():
        if current and used + len(word) + 1 > width:
            lines.append(" ".join(current))
            current = []
            used = 0
        current.append(word)
        used += len(word) + 1
    if current:
        lines.append(" ".join(current))
    return lines


def _render_paragraph(text: str, options: ReflowOptions) -> List[str]:
    units = split_sentences(text) if options.sentences_enabled() else [text]
    rendered: List[str] = []
    for unit in units:
        rendered.extend(wrap_text(unit, options.wrap_width))
    return rendered


def build_blocks(paragraphs: List[List[str]], options: ReflowOptions) -> List[str]:
    """Turn grouped caption lines into output blocks.

    Flat mode: every sentence of the stream is its own block.
    Paragraph mode: every paragraph is one block; sentences are split onto
    consecutive lines only when split_sentences is explicitly True.
    Wrapped lines are joined by a single newline.
    """
    blocks: List[str] = []
    if not options.group_by_blank_line:
        for group in paragraphs:
            stream = " ".join(group)
            units = split_sentences(stream) if options.sentences_enabled() else [stream]
            for unit in units:
                blocks.append("\n".join(wrap_text(unit, options.wrap_width)))
        return blocks

    for group in paragraphs:
        rendered = _render_paragraph(" ".join(group), options)
        if rendered:
            blocks.append("\n".join(rendered))
    return blocks


def reflow_lines(lines: Iterable[str], options: Optional[ReflowOptions] = None) -> str:
    """Convert raw SubRip lines into readable text.

    Args:
        lines: Raw lines of the subtitle file in file order, without line
               terminators.
        options: Reflow configuration; defaults to ReflowOptions().

    Returns:
        Blocks separated by a blank line and terminated by one newline, or
        "" when the input holds no caption text.

    Raises:
        InvalidOptionsError: options failed validation. Raised before any
            line is read.
    """
    if options is None:
        options = ReflowOptions()
    options.validate()

    paragraphs = collect_paragraphs(lines, options)
    blocks = build_blocks(paragraphs, options)
    logger.debug("Produced %d output block(s)", len(blocks))
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def reflow_text(text: str, options: Optional[ReflowOptions] = None) -> str:
    """Like reflow_lines() but takes the whole file content as one string."""
    if text.startswith("\ufeff"):
        text = text[1:]
    return reflow_lines(split_lines(text), options)


def split_lines(text: str) -> List[str]:
    """Split file content into lines on "\\n" only.

    RULES:
    - A trailing "\\r" is removed from each line (CRLF files)
    - Other separators (form feed, U+2028, ...) stay inside the line
    - A final line terminator does not produce an extra empty line
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
