"""End-to-end compile of one program file.

WHY: The CLI, tests, and any embedding tool all need the same sequence
- load the repertoire, tokenize the source, validate, write: with the
same error behavior. Keeping it in one function keeps the CLI thin.

HOW: run() resolves the repertoire path, loads it, tokenizes the input,
and calls validate(), which writes the output on success.

RULES:
- The repertoire and the source must both load before validation runs
- Errors propagate unchanged; nothing here catches SicompilerError
- Returns the written output path
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sicompiler.config import resolve_repertoire_path
from sicompiler.core.repertoire import load_repertoire
from sicompiler.core.tokenizer import tokenize
from sicompiler.core.validator import validate

logger = logging.getLogger(__name__)


def run(
    input_path: str | Path,
    output_path: str | Path,
    repertoire_path: Optional[str | Path] = None,
    output_format: str = "canonical",
) -> Path:
    """Compile ``input_path`` against a repertoire into ``output_path``.

    Args:
        input_path: Program source file.
        output_path: File to create or overwrite.
        repertoire_path: Repertoire file; the configured default when None.
        output_format: Formatter key from FORMATTERS.

    Returns:
        The path that was written.

    Raises:
        SicompilerIOError: A file could not be read or written.
        TokenizationError: The source or repertoire is malformed.
        ValidationError: The program breaks a semantic rule.
    """
    rep_path = resolve_repertoire_path(repertoire_path)
    logger.info("Using repertoire %s", rep_path)

    repertoire = load_repertoire(rep_path)
    program = tokenize(input_path)

    return validate(program, repertoire, output_path, output_format)
