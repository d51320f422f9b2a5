"""Configuration constants and .env loading.

WHY: The yt-dlp executable, subtitle language, default wrap width and
subprocess timeout differ between machines and workflows. Keeping them
in one place, overridable from the environment, avoids editing code.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values read from environment variables with defaults.

RULES:
- Every default can be overridden via a CLEANSRT_* environment variable
- Integer settings are read when used (not on import), so a malformed
  value raises ValueError naming the variable where the caller handles it
- A wrap width of 0 disables wrapping
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the directory the command is run from
load_dotenv()


def load_int_setting(name: str, default: int) -> int:
    """Read an integer setting from the environment.

    RULES:
    - Missing or blank values return the default
    - Non-integer values raise ValueError with the variable name
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "Invalid value for {}: {!r} (expected an integer)".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# Subtitle acquisition (yt-dlp)
# ---------------------------------------------------------------------------

YTDLP_BINARY = os.getenv("CLEANSRT_YTDLP_BINARY", "yt-dlp")
DEFAULT_SUB_LANGUAGE = os.getenv("CLEANSRT_SUB_LANGUAGE", "en")


def ytdlp_timeout_s() -> int:
    """Per-invocation yt-dlp timeout in seconds (CLEANSRT_YTDLP_TIMEOUT)."""
    return load_int_setting("CLEANSRT_YTDLP_TIMEOUT", 300)


# ---------------------------------------------------------------------------
# Reflow defaults
# ---------------------------------------------------------------------------

def default_wrap_width() -> int:
    """Maximum characters per output line for the CLI; 0 disables wrapping."""
    return load_int_setting("CLEANSRT_WRAP_WIDTH", 130)


OUTPUT_SUFFIX = ".txt"
FALLBACK_STEM = "transcript"
