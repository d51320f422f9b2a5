"""Read SubRip files that are already on disk (or piped on stdin)."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Union

from cleansrt.core.reflow import split_lines

STDIN_MARKER = "-"


def read_subtitle_file(path: Union[str, Path]) -> List[str]:
    """Return the lines of a subtitle file without line terminators.

    RULES:
    - "-" reads from stdin
    - UTF-8 with an optional BOM (yt-dlp and many editors write one),
      regardless of the locale encoding
    - Lines end at "\\n" only; a trailing "\\r" is dropped
    - OSError / UnicodeDecodeError propagate to the caller
    """
    if str(path) == STDIN_MARKER:
        data = sys.stdin.buffer.read()
    else:
        data = Path(path).read_bytes()
    return split_lines(data.decode("utf-8-sig"))
