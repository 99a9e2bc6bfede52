"""Semantic validation gates and the final write.

WHY: A program can be structurally sound yet still unusable by the
loader: empty sections, non-hex addresses, mnemonics the machine does
not have, or the wrong number of parameters. These must be caught
before anything is written, and always in the same order so the same
broken input always reports the same error.

HOW: Four gate functions run in a fixed order. Each raises
ValidationError on the first offending record. When all four pass,
validate() hands the program to the serializer exactly once.

RULES:
- Gate order: non-empty → variables hex → init hex → instructions
- The first failing gate stops the run; no gate is retried
- Hex checks look at the FIRST character only ("1G23" passes)
- Instruction checks, per instruction in order: known mnemonic,
  matching has_params, matching parameter count, hex parameters
- Nothing is written unless every gate passes
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from sicompiler.core.ir import Program, Repertoire
from sicompiler.core.serializer import write_program
from sicompiler.errors import ValidationError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex(tokens: Iterable[str]) -> bool:
    """True if every token's first character is an ASCII hex digit.

    Only the first character is inspected; the rest of the token is
    not checked. An empty token is not hex.
    """
    return all(token[:1] in _HEX_DIGITS for token in tokens)


def validate_program(program: Program) -> None:
    """Gate 1: both the variables and instructions sections have entries."""
    if not program.variables or not program.instructions:
        raise ValidationError("There is not any instructions or variables section")


def validate_variables(program: Program) -> None:
    """Gate 2: every variable's address and value start with a hex digit."""
    for variable in program.variables:
        if not is_hex((variable.address, variable.value)):
            raise ValidationError(
                "The variable address and value must be in hex base '{} {}'".format(
                    variable.address, variable.value
                )
            )


def validate_init(program: Program) -> None:
    """Gate 3: the init address starts with a hex digit."""
    if not is_hex((program.init.address,)):
        raise ValidationError(
            "The init address must be in hex base '{}'".format(program.init.address)
        )


def validate_instructions(program: Program, repertoire: Repertoire) -> None:
    """Gate 4: every instruction conforms to its repertoire template.

    RULES:
    - Unknown mnemonic → "does not appear in the repertoire"
    - has_params differs from the template → parameter-count class mismatch
    - Parameter count differs from the template's → wrong parameter count
    - With parameters, each must start with a hex digit
    """
    for instruction in program.instructions:
        template = repertoire.get(instruction.mnemonic)
        if template is None:
            raise ValidationError(
                "Invalid instruction, '{}' does not appear in the repertoire".format(
                    instruction.mnemonic
                )
            )

        expected = len(template.params)
        got = len(instruction.params)

        if instruction.has_params != template.has_params:
            raise ValidationError(
                "Parameter-count class mismatch in '{}', the repertoire expects {} "
                "parameter(s) but get {}".format(instruction.mnemonic, expected, got)
            )

        if got != expected:
            raise ValidationError(
                "Wrong parameter count in '{}', only has {} but get {}".format(
                    instruction.mnemonic, expected, got
                )
            )

        if instruction.has_params and not is_hex(instruction.params):
            raise ValidationError(
                "Invalid parameters in '{}', the parameters must be in hex base '{}'".format(
                    instruction.mnemonic, " ".join(instruction.params)
                )
            )


def validate(
    program: Program,
    repertoire: Repertoire,
    output_path: str | Path,
    output_format: str = "canonical",
) -> Path:
    """Run every gate over ``program`` and write it on success.

    Args:
        program: The tokenized program.
        repertoire: The loaded repertoire, used read-only.
        output_path: Where to write the serialized program.
        output_format: Formatter key from FORMATTERS.

    Returns:
        The path that was written.

    Raises:
        ValidationError: From the first failing gate; nothing is written.
        SicompilerIOError: If the output file cannot be written.
    """
    validate_program(program)
    validate_variables(program)
    validate_init(program)
    validate_instructions(program, repertoire)
    logger.debug("All validation gates passed")

    return write_program(program, output_path, output_format)
