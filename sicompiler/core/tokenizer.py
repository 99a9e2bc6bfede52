"""Source reading, section splitting, and per-section tokenizing.

WHY: A program file has three ``@``-delimited sections (variables, the
init address, and the instruction stream), each with its own line
format. The validator needs them as typed records, and structural
mistakes (wrong section count, malformed variable lines, missing start
address) must be reported before any semantic check runs.

HOW: tokenize() reads the whole file, rejects an empty file, strips
comments, splits on ``@`` into exactly three sections, and hands each
section to its tokenizer. The result is a Program IR. No repertoire
lookups happen here.

RULES:
- Empty file (before stripping) → TokenizationError "The file is empty"
- Section count must be exactly 3 after stripping
- Variables: each non-blank line has exactly 2 tokens
- Init: the whole section holds exactly 1 token
- Instructions: first token is the mnemonic, the rest are parameters
- Blank and whitespace-only lines are skipped in every section
- Unreadable files raise SicompilerIOError with the path
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from sicompiler.core.comments import split_lines, strip_comments
from sicompiler.core.ir import InitDirective, Instruction, Program, Variable
from sicompiler.errors import SicompilerIOError, TokenizationError

logger = logging.getLogger(__name__)

SECTION_DELIMITER = "@"
SECTION_COUNT = 3


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file, wrapping failures with the path.

    RULES:
    - OSError (missing, unreadable, directory) → SicompilerIOError
    - Invalid UTF-8 → SicompilerIOError
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SicompilerIOError(path, exc) from exc


def split_sections(text: str) -> Tuple[str, str, str]:
    """Split comment-free source text into its three sections.

    Raises:
        TokenizationError: If the text does not split into exactly three
            ``@``-delimited sections.
    """
    sections = text.split(SECTION_DELIMITER)
    if len(sections) != SECTION_COUNT:
        raise TokenizationError(
            "Invalid number of sections, must be {} but get {}".format(
                SECTION_COUNT, len(sections)
            )
        )
    variables, init, instructions = sections
    return variables, init, instructions


def tokenize_variables(section: str) -> List[Variable]:
    """Parse ``address value`` lines into Variables, in order."""
    variables: List[Variable] = []
    for line in split_lines(section):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2:
            raise TokenizationError(
                "Invalid variable format '{}', the correct way is <ADDRESS VALUE>".format(
                    line.strip()
                )
            )
        variables.append(Variable(address=parts[0], value=parts[1]))
    return variables


def tokenize_init(section: str) -> InitDirective:
    """Parse the init section, which must hold exactly one address."""
    tokens = section.split()
    if not tokens:
        raise TokenizationError("No init section address found, expected exactly one")
    if len(tokens) > 1:
        raise TokenizationError(
            "Multiple init addresses found, expected one but get {}: '{}'".format(
                len(tokens), " ".join(tokens)
            )
        )
    return InitDirective(address=tokens[0])


def tokenize_instructions(section: str) -> List[Instruction]:
    """Parse ``MNEMONIC [params...]`` lines into Instructions, in order."""
    instructions: List[Instruction] = []
    for line in split_lines(section):
        parts = line.split()
        if not parts:
            continue
        instructions.append(Instruction(mnemonic=parts[0], params=parts[1:]))
    return instructions


def tokenize_text(text: str) -> Program:
    """Build a Program from raw (comment-bearing) source text.

    WHY: Split out of tokenize() so the structural rules can be exercised
    without touching the file system.

    Raises:
        TokenizationError: On an empty text or any structural error.
    """
    if not text:
        raise TokenizationError("The file is empty")

    stripped = strip_comments(text)
    variables_section, init_section, instructions_section = split_sections(stripped)

    variables = tokenize_variables(variables_section)
    init = tokenize_init(init_section)
    instructions = tokenize_instructions(instructions_section)

    logger.debug(
        "Tokenized %d variable(s), init %s, %d instruction(s)",
        len(variables), init.address, len(instructions),
    )
    return Program(variables=variables, init=init, instructions=instructions)


def tokenize(path: str | Path) -> Program:
    """Read the program file at ``path`` and tokenize it into a Program.

    Args:
        path: Path to the UTF-8 program source.

    Returns:
        The Program IR, with variables and instructions in source order.

    Raises:
        SicompilerIOError: If the file cannot be read.
        TokenizationError: If the file is empty or structurally malformed.
    """
    logger.debug("Tokenizing %s", path)
    return tokenize_text(read_text_file(path))
