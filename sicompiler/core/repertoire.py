"""Instruction repertoire loading.

WHY: The set of valid mnemonics, and whether each takes a parameter,
belongs to the target machine rather than to the compiler. It lives in
a separate repertoire file so the same front end serves several machine
configurations.

HOW: The repertoire file is partitioned by ``$`` characters: metadata,
then the microprogram, then the instruction list. load_repertoire()
takes the part after the second ``$``, drops one leading newline, and
turns each ``MNEMONIC flag`` line into a template Instruction.

RULES:
- The text must contain ``$`` and a part after the second ``$``
- At most MAX_INSTRUCTIONS lines in the instruction list (blank lines count)
- flag == "true" → one parameter; anything else (or missing) → none
- Blank lines are skipped
- A repeated mnemonic silently replaces the earlier entry
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from sicompiler.core.comments import split_lines
from sicompiler.core.ir import Instruction, Repertoire
from sicompiler.core.tokenizer import read_text_file
from sicompiler.errors import TokenizationError

logger = logging.getLogger(__name__)

REPERTOIRE_SEPARATOR = "$"

# Hard limit of the target control unit's opcode space.
MAX_INSTRUCTIONS = 32

_PARAMS_FLAG = "true"


def parse_repertoire(text: str) -> Repertoire:
    """Build a Repertoire from repertoire file text.

    Raises:
        TokenizationError: If the ``$`` structure is missing or the
            instruction list has more than MAX_INSTRUCTIONS lines.
    """
    if REPERTOIRE_SEPARATOR not in text:
        raise TokenizationError(
            "Invalid repertoire structure, the file must contain a microprogram section."
        )

    parts = text.split(REPERTOIRE_SEPARATOR)
    if len(parts) < 3:
        raise TokenizationError(
            "Invalid repertoire structure, no instruction list after the microprogram section."
        )

    instructions_part = parts[2]
    if instructions_part.startswith("\n"):
        instructions_part = instructions_part[1:]

    lines = split_lines(instructions_part)
    if len(lines) > MAX_INSTRUCTIONS:
        raise TokenizationError(
            "Invalid number of instructions, the max is {} but get {}".format(
                MAX_INSTRUCTIONS, len(lines)
            )
        )

    templates: Dict[str, Instruction] = {}
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        mnemonic = parts[0]
        has_params = len(parts) > 1 and parts[1] == _PARAMS_FLAG
        if mnemonic in templates:
            logger.debug("Repertoire entry %s redefined", mnemonic)
        templates[mnemonic] = Instruction.template(mnemonic, has_params)

    return Repertoire(templates)


def load_repertoire(path: str | Path) -> Repertoire:
    """Read and parse the repertoire file at ``path``.

    Args:
        path: Path to the UTF-8 repertoire file.

    Returns:
        Read-only mapping of mnemonic → template Instruction.

    Raises:
        SicompilerIOError: If the file cannot be read.
        TokenizationError: If the file structure is invalid.
    """
    repertoire = parse_repertoire(read_text_file(path))
    logger.debug("Loaded %d repertoire entries from %s", len(repertoire), path)
    return repertoire
