"""Abstract base formatter for serialized programs.

WHY: A program that passed every gate is written either in the
loader's section layout or as JSON for other lab tooling. write_program()
only needs to turn a Program into text, whichever layout was picked.

HOW: A formatter renders the whole Program in memory and returns it;
the serializer owns the file handle.

RULES:
- A concrete formatter supplies a display ``name`` and ``format(program)``
- Rendering never touches the file system
- Each output line is terminated by "\\n"
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sicompiler.core.ir import Program


class BaseFormatter(ABC):
    """Abstract base for all program formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Canonical text'."""

    @abstractmethod
    def format(self, program: Program) -> str:
        """Render the Program IR as the full output file content.

        Args:
            program: A program that passed every validation gate.

        Returns:
            The file content as a string.
        """
