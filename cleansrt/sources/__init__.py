"""Subtitle sources: yt-dlp for video URLs, plain files for local .srt.

Every source returns the raw SubRip lines (no line terminators) that
cleansrt.core.reflow_lines() consumes.
"""

from cleansrt.sources.local import STDIN_MARKER, read_subtitle_file
from cleansrt.sources.ytdlp import (
    SubtitleSourceError,
    SubtitleSourceTimeoutError,
    YtDlpSource,
    is_url,
)

__all__ = [
    "STDIN_MARKER",
    "read_subtitle_file",
    "SubtitleSourceError",
    "SubtitleSourceTimeoutError",
    "YtDlpSource",
    "is_url",
]
