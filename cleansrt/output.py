"""Output naming and writing for cleaned transcripts.

WHY: Transcripts are saved under the video title, and titles routinely
contain characters that are illegal in filenames ("Q&A: what/why?").
Running the tool twice on the same video must not silently overwrite
the earlier result.

HOW: sanitize_title() maps forbidden characters to "-".
resolve_output_path() adds a numeric suffix (-2, -3, ...) on conflict.
write_transcript() writes the already-complete text in one call.

RULES:
- Forbidden characters: / \\ : * ? " < > | and NUL, each replaced by "-"
- Leading/trailing dots and spaces are stripped; max 200 characters
- An empty result falls back to "transcript"
- The transcript text is computed before the file is opened
"""

from __future__ import annotations

import unicodedata
from pathlib import Path

from cleansrt.config import FALLBACK_STEM, OUTPUT_SUFFIX

_FORBIDDEN_CHARS = '/\\:*?"<>|\0'
_MAX_STEM_CHARS = 200


def sanitize_title(title: str) -> str:
    """Make a video title safe to use as a filename stem."""
    title = unicodedata.normalize("NFC", title)
    stem = "".join("-" if ch in _FORBIDDEN_CHARS else ch for ch in title)
    stem = stem.strip(". ")
    if len(stem) > _MAX_STEM_CHARS:
        stem = stem[:_MAX_STEM_CHARS].rstrip(". ")
    return stem or FALLBACK_STEM


def resolve_output_path(output_dir: Path, stem: str, suffix: str = OUTPUT_SUFFIX) -> Path:
    """Return a path in output_dir for stem+suffix that does not exist yet.

    First attempt is ``{stem}{suffix}``; conflicts become
    ``{stem}-2{suffix}``, ``{stem}-3{suffix}`` and so on.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, suffix)
        if not candidate.exists():
            return candidate
        counter += 1


def write_transcript(text: str, output_dir: Path, stem: str) -> Path:
    """Save a cleaned transcript and return the path written.

    Raises:
        OSError: the directory is missing or not writable, disk full, etc.
    """
    path = resolve_output_path(output_dir, stem)
    path.write_text(text, encoding="utf-8")
    return path
