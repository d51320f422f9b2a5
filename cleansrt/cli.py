"""Command-line interface for cleansrt.

WHY: The typical job is "give me a readable transcript of this video".
The CLI wires the pieces together — yt-dlp subtitle download (or a local
.srt file), the reflow core, and the output sink — behind one command
whose stdout is just the written file path, so it composes in scripts.

HOW: argparse builds ReflowOptions from flags, the source is chosen by
the shape of the positional argument (URL, file path, or "-"), the
whole transcript is cleaned in memory, then written (or printed with
--stdout). --debug turns on DEBUG logging to stderr.

RULES:
- stdout carries only the output file path (or the text with --stdout)
- Status and error messages go to stderr
- Options are validated before any subtitle is fetched
- Exit codes: 0 = success, 1 = error, 130 = interrupted
- Output filename: sanitized video title (URL), file stem (local file),
  "transcript" (stdin); never overwrites an existing file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cleansrt import __version__
from cleansrt.config import (
    DEFAULT_SUB_LANGUAGE,
    FALLBACK_STEM,
    default_wrap_width,
)
from cleansrt.core import InvalidOptionsError, ReflowOptions, reflow_lines
from cleansrt.output import sanitize_title, write_transcript
from cleansrt.sources import (
    STDIN_MARKER,
    SubtitleSourceError,
    YtDlpSource,
    is_url,
    read_subtitle_file,
)

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    _status("Error: {}".format(msg))
    sys.exit(1)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def options_from_args(args: argparse.Namespace) -> ReflowOptions:
    """Translate parsed CLI flags into ReflowOptions (validated)."""
    options = ReflowOptions(
        group_by_blank_line=args.paragraphs,
        wrap_width=args.wrap_width,
        strip_speaker_marker=not args.keep_speaker_markers,
        split_sentences=args.sentences,
    )
    options.validate()
    return options


def _load_lines(args: argparse.Namespace) -> tuple:
    """Acquire the raw subtitle lines and the output filename stem.

    Returns:
        Tuple of (lines, stem).
    """
    source = args.source

    if is_url(source):
        ytdlp = YtDlpSource(language=args.language)
        _status("Fetching title...")
        title = ytdlp.fetch_title(source)
        _status("Downloading '{}' auto-subtitles...".format(args.language))
        lines = ytdlp.fetch_subtitles(source)
        return lines, sanitize_title(title)

    if source == STDIN_MARKER:
        return read_subtitle_file(STDIN_MARKER), FALLBACK_STEM

    path = Path(source)
    if not path.is_file():
        _fail("File not found: {}".format(path))
    return read_subtitle_file(path), sanitize_title(path.stem)


def _run(args: argparse.Namespace) -> None:
    options = options_from_args(args)

    output_dir: Optional[Path] = None
    if not args.stdout:
        output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))
        logger.debug("Using output directory: %s", output_dir)

    lines, stem = _load_lines(args)
    logger.debug("Read %d subtitle lines", len(lines))

    text = reflow_lines(lines, options)
    logger.debug("Formatted transcript length: %d characters", len(text))
    if not text:
        _status("Warning: no caption text found in {}".format(args.source))

    if args.stdout:
        sys.stdout.write(text)
        return

    saved = write_transcript(text, output_dir, stem)
    print(saved)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: source (URL, .srt path, or "-")
    - Output: --output-dir/-od, --stdout
    - Reflow: --wrap-width, --paragraphs, --sentences/--no-sentences,
      --keep-speaker-markers
    - Acquisition: --language
    """
    parser = argparse.ArgumentParser(
        prog="cleansrt",
        description="Download (or read) auto-generated subtitles and clean them "
                    "into readable text.",
    )

    parser.add_argument(
        "source",
        help="Video URL (subtitles fetched with yt-dlp), path to a .srt file, "
             "or '-' to read SubRip text from stdin.",
    )

    parser.add_argument(
        "-od", "--output-dir", "--outputdir",
        dest="output_dir",
        default=None,
        help="Directory for the output .txt file (default: current directory).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the cleaned transcript instead of writing a file.",
    )

    parser.add_argument(
        "--wrap-width",
        type=int,
        default=default_wrap_width(),
        help="Maximum characters per output line, 0 disables wrapping "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "--paragraphs",
        action="store_true",
        help="Keep the blank-line structure of the subtitle file as paragraphs.",
    )

    parser.add_argument(
        "--sentences",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Split the text into sentences (default: on, off with --paragraphs).",
    )

    parser.add_argument(
        "--keep-speaker-markers",
        action="store_true",
        help="Keep leading '>>' speaker-change markers.",
    )

    parser.add_argument(
        "--language",
        default=DEFAULT_SUB_LANGUAGE,
        help="Subtitle language requested from yt-dlp (default: %(default)s).",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``cleansrt`` and ``python -m cleansrt``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    try:
        parser = build_parser()
    except ValueError as e:
        # Malformed CLEANSRT_* setting
        _fail(str(e))
    args = parser.parse_args(argv)
    _configure_logging(args.debug)

    try:
        _run(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except InvalidOptionsError as e:
        _fail("Invalid options: {}".format(e))
    except SubtitleSourceError as e:
        _fail(str(e))
    except ValueError as e:
        # Config errors (malformed CLEANSRT_* setting) and undecodable input
        _fail(str(e))
    except OSError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
