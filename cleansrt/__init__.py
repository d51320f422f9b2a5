"""cleansrt — turn auto-generated video subtitles into readable text.

WHY: Auto-captions (e.g. YouTube's) come as SubRip files full of cue
numbers, timing lines and scrolling repeats of the same caption. Nobody
can read that as a transcript. This package strips the metadata,
suppresses the repeats and reflows the words into sentences or
paragraphs with an optional line width.

HOW: Two layers — the pure core (classify each line, reflow the caption
text) and thin collaborators around it (yt-dlp subtitle source, local
file source, output sink, CLI). The core never touches I/O.

RULES:
- reflow_lines() / reflow_text() are the public API for cleaning
- The core is a pure function of (lines, ReflowOptions)
- All I/O and subprocess failures belong to the collaborators
"""

from cleansrt.core import (
    InvalidOptionsError,
    LineKind,
    ReflowOptions,
    classify,
    reflow_lines,
    reflow_text,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidOptionsError",
    "LineKind",
    "ReflowOptions",
    "classify",
    "reflow_lines",
    "reflow_text",
]
