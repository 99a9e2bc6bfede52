"""Writes a validated Program to the output file.

WHY: The validator must hand off to exactly one writer, and that writer
must own the file handle for the whole write so a failed run never
leaves a half-appended artifact behind.

HOW: Looks up the formatter by key, renders the full content in memory,
then opens the output path in create-or-truncate mode and writes it in
one go. The handle is closed (and flushed) before returning.

RULES:
- Never appends: an existing file is truncated
- Line endings are always "\\n", on every platform
- OSError → SicompilerIOError carrying the output path
- Unknown formatter key → ValueError, raised before the file is opened
"""

from __future__ import annotations

import logging
from pathlib import Path

from sicompiler.core.ir import Program
from sicompiler.errors import SicompilerIOError
from sicompiler.formatters import FORMATTERS

logger = logging.getLogger(__name__)


def render_program(program: Program, output_format: str = "canonical") -> str:
    """Render ``program`` with the formatter registered as ``output_format``."""
    if output_format not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS))
        raise ValueError(
            "Unknown format '{}'. Available formats: {}".format(output_format, available)
        )
    formatter = FORMATTERS[output_format]()
    return formatter.format(program)


def write_program(
    program: Program,
    output_path: str | Path,
    output_format: str = "canonical",
) -> Path:
    """Serialize ``program`` to ``output_path``.

    Returns:
        The path that was written.

    Raises:
        ValueError: If ``output_format`` is not registered.
        SicompilerIOError: If the file cannot be opened or written.
    """
    path = Path(output_path)
    content = render_program(program, output_format)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as exc:
        raise SicompilerIOError(path, exc) from exc

    logger.info("Wrote %s (%d bytes, format %s)", path, len(content.encode("utf-8")), output_format)
    return path
