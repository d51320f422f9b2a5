"""Core cleaning pipeline: line classification and transcript reflow."""

from cleansrt.core.classifier import classify, is_content
from cleansrt.core.model import InvalidOptionsError, LineKind, ReflowOptions
from cleansrt.core.reflow import reflow_lines, reflow_text

__all__ = [
    "classify",
    "is_content",
    "InvalidOptionsError",
    "LineKind",
    "ReflowOptions",
    "reflow_lines",
    "reflow_text",
]
