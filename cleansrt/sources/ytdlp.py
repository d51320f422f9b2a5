"""Subtitle source backed by the yt-dlp executable.

WHY: The transcripts we clean are YouTube (and similar) auto-captions.
yt-dlp already knows how to find and convert them, so we drive it as a
subprocess instead of talking to any video site ourselves.

HOW: Two yt-dlp invocations per video:
  1. ``yt-dlp --get-title URL`` for the output filename.
  2. ``yt-dlp --write-auto-sub --sub-lang LANG --skip-download
     --convert-subs srt -o TMP/transcript.%(ext)s URL`` into a fresh
     temporary directory, then read TMP/transcript.LANG.srt.

RULES:
- The temporary directory is always removed, even on failure
- Every acquisition failure raises SubtitleSourceError (or its timeout
  subclass); callers treat it as fatal
- yt-dlp output is logged at DEBUG level, never printed
- Returned lines carry no line terminators
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from cleansrt.config import DEFAULT_SUB_LANGUAGE, YTDLP_BINARY, ytdlp_timeout_s
from cleansrt.sources.local import read_subtitle_file

logger = logging.getLogger(__name__)

_STDERR_TAIL_CHARS = 500
_OUTPUT_TEMPLATE = "transcript.%(ext)s"


class SubtitleSourceError(Exception):
    """Raised when subtitles cannot be acquired for a source.

    WHY: The CLI needs one exception type to tell acquisition failures
    (missing executable, unreachable video, no captions in the requested
    language) from cleaning or writing failures.

    HOW: Raised by YtDlpSource with a message that includes the tail of
    yt-dlp's stderr when there is one.
    """


class SubtitleSourceTimeoutError(SubtitleSourceError, TimeoutError):
    """Raised when a yt-dlp invocation exceeds the configured timeout."""


class YtDlpSource:
    """Fetch video titles and auto-generated subtitles through yt-dlp.

    Args:
        binary: yt-dlp executable name or path.
        language: Subtitle language code passed to ``--sub-lang``.
        timeout_s: Per-invocation timeout in seconds; None reads
            CLEANSRT_YTDLP_TIMEOUT (default 300).
    """

    def __init__(
        self,
        binary: str = YTDLP_BINARY,
        language: str = DEFAULT_SUB_LANGUAGE,
        timeout_s: Optional[int] = None,
    ) -> None:
        self.binary = binary
        self.language = language
        self.timeout_s = ytdlp_timeout_s() if timeout_s is None else timeout_s

    def _run(self, args: List[str]) -> str:
        """Run yt-dlp with args and return its stdout.

        RULES:
        - Missing executable, non-zero exit and timeout all raise
        - stdout/stderr are logged at DEBUG level
        """
        cmd = [self.binary] + args
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
            )
        except FileNotFoundError:
            raise SubtitleSourceError(
                "yt-dlp executable not found: {!r}. Install yt-dlp or set "
                "CLEANSRT_YTDLP_BINARY.".format(self.binary)
            ) from None
        except subprocess.TimeoutExpired:
            raise SubtitleSourceTimeoutError(
                "yt-dlp timed out after {}s".format(self.timeout_s)
            ) from None

        if result.stdout:
            logger.debug("yt-dlp stdout:\n%s", result.stdout.rstrip())
        if result.stderr:
            logger.debug("yt-dlp stderr:\n%s", result.stderr.rstrip())

        if result.returncode != 0:
            detail = (result.stderr or "").strip()[-_STDERR_TAIL_CHARS:]
            raise SubtitleSourceError(
                "yt-dlp failed with exit code {}{}".format(
                    result.returncode, ": " + detail if detail else ""
                )
            )
        return result.stdout

    def fetch_title(self, url: str) -> str:
        """Return the video title reported by yt-dlp."""
        title = self._run(["--get-title", url]).strip()
        logger.debug("Video title: %s", title)
        return title

    def fetch_subtitles(self, url: str) -> List[str]:
        """Download the auto-generated subtitles of url as SubRip lines.

        Raises:
            SubtitleSourceError: yt-dlp failed or produced no subtitle file
                (typically: no auto-captions in the requested language).
        """
        with tempfile.TemporaryDirectory(prefix="cleansrt_") as tmp:
            tmp_dir = Path(tmp)
            logger.debug("Temporary directory: %s", tmp_dir)
            self._run([
                "--write-auto-sub",
                "--sub-lang", self.language,
                "--skip-download",
                "--convert-subs", "srt",
                "-o", str(tmp_dir / _OUTPUT_TEMPLATE),
                url,
            ])

            srt_path = self.subtitle_path(tmp_dir)
            if not srt_path.is_file():
                raise SubtitleSourceError(
                    "No '{}' auto-generated subtitles found for {}".format(
                        self.language, url
                    )
                )
            lines = read_subtitle_file(srt_path)
            logger.debug("Read %d lines from %s", len(lines), srt_path.name)
            return lines

    def subtitle_path(self, tmp_dir: Path) -> Path:
        """Where yt-dlp writes the converted subtitle file inside tmp_dir."""
        return tmp_dir / "transcript.{}.srt".format(self.language)


def is_url(source: Optional[str]) -> bool:
    """True if source looks like an http(s) URL rather than a file path."""
    if not source:
        return False
    lowered = source.strip().lower()
    return lowered.startswith("http://") or lowered.startswith("https://")
