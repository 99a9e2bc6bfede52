"""Intermediate representation dataclasses for parsed programs.

WHY: The tokenizer, the validator, and every output formatter need the
same view of a program (its variables, its start address, and its
instruction stream) without re-reading the source text. The IR is that
single, well-typed form, and it doubles as the repertoire's template
type so arity checks compare like with like.

HOW: Four frozen dataclasses and one read-only mapping:
  Variable      : one "address value" line of the variables section
  InitDirective : the single program-counter start address
  Instruction   : a mnemonic plus its ordered parameters
  Program       : variables, init, and instructions in source order
  Repertoire    : mnemonic → template Instruction

RULES:
- All values are kept as the raw source tokens (no numeric conversion)
- has_params is derived from params; it is never stored separately
- A repertoire template with parameters carries exactly one placeholder
- Program sequences keep source order; serialization relies on it
- Instances are immutable once built
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

# Stand-in parameter for repertoire templates. Only its presence matters:
# a template with one placeholder expects exactly one parameter.
ARITY_PLACEHOLDER = "0"


@dataclass(frozen=True)
class Variable:
    """One entry of the variables section: ``address value``."""

    address: str
    value: str


@dataclass(frozen=True)
class InitDirective:
    """The program counter start address."""

    address: str


@dataclass(frozen=True)
class Instruction:
    """A mnemonic with its ordered parameters.

    WHY: Program lines and repertoire entries both need a mnemonic and an
    arity. Using one type for both lets the validator compare a program
    instruction directly against its template.

    HOW: params is stored as a tuple; has_params is computed from it.
    Repertoire templates are built with ``Instruction.template()``.

    RULES:
    - has_params is True iff params is non-empty
    - Parameter order is source order
    """

    mnemonic: str
    params: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable (lists from str.split) but store a tuple
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    @property
    def has_params(self) -> bool:
        return bool(self.params)

    @classmethod
    def template(cls, mnemonic: str, has_params: bool) -> Instruction:
        """Build a repertoire template for ``mnemonic``.

        Templates that take a parameter get one placeholder so their
        parameter count is 1; the others get none.
        """
        params = (ARITY_PLACEHOLDER,) if has_params else ()
        return cls(mnemonic=mnemonic, params=params)


@dataclass(frozen=True)
class Program:
    """A structurally valid program, ready for the validation gates.

    RULES:
    - variables: in source order, one per non-blank variables line
    - init: exactly one start address
    - instructions: in source order, one per non-blank instruction line
    """

    variables: Tuple[Variable, ...]
    init: InitDirective
    instructions: Tuple[Instruction, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.variables, tuple):
            object.__setattr__(self, "variables", tuple(self.variables))
        if not isinstance(self.instructions, tuple):
            object.__setattr__(self, "instructions", tuple(self.instructions))


class Repertoire(Mapping):
    """Read-only mapping of mnemonic to template Instruction.

    WHY: The validator only needs lookups. Wrapping the dict keeps the
    loaded table from being mutated after load_repertoire() returns.

    HOW: Copies the given mapping into a private dict and exposes the
    Mapping protocol over it.
    """

    def __init__(self, templates: Mapping[str, Instruction] | Iterable[Tuple[str, Instruction]] = ()) -> None:
        self._templates: Dict[str, Instruction] = dict(templates)

    def __getitem__(self, mnemonic: str) -> Instruction:
        return self._templates[mnemonic]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return "Repertoire({})".format(sorted(self._templates))
