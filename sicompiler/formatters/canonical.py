"""Canonical text formatter: the loader's input layout.

WHY: The downstream assembler/loader reads a fixed three-section layout
with no comments and single-space separators. Writing exactly that
layout, and nothing else, keeps the output byte-identical across runs
and re-tokenizable by this package.

HOW: One line per variable, an ``@`` line, the init address, another
``@`` line, then one line per instruction.

RULES:
- Variable line: "{address} {value}"
- Instruction line: "{mnemonic} {params joined by one space}"; a
  parameterless instruction keeps its trailing space ("HALT ")
- No blank lines anywhere; every line ends with "\\n"
"""

from __future__ import annotations

from typing import List

from sicompiler.core.ir import Program
from sicompiler.core.tokenizer import SECTION_DELIMITER
from sicompiler.formatters.base import BaseFormatter


class CanonicalFormatter(BaseFormatter):
    """Formatter that produces the canonical three-section text."""

    @property
    def name(self) -> str:
        return "Canonical text"

    def format(self, program: Program) -> str:
        lines: List[str] = []
        for variable in program.variables:
            lines.append("{} {}".format(variable.address, variable.value))
        lines.append(SECTION_DELIMITER)
        lines.append(program.init.address)
        lines.append(SECTION_DELIMITER)
        for instruction in program.instructions:
            lines.append("{} {}".format(instruction.mnemonic, " ".join(instruction.params)))
        return "".join(line + "\n" for line in lines)
