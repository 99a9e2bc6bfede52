"""Structured JSON formatter for validated programs.

WHY: Tools other than the loader (debuggers, visualizers, graders) want
the program as data rather than re-parsing the canonical text. The JSON
layout mirrors the Program IR one to one.

HOW: Builds a dict from the IR, validates it against the bundled
program.schema.json with jsonschema, then dumps it with two-space
indentation and a trailing newline.

RULES:
- Top-level keys: "variables", "init", "instructions"
- Variables are {"address", "value"}; instructions are {"mnemonic", "params"}
- Order of variables, instructions, and params is source order
- Validate output against the schema before returning; raise on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from sicompiler.core.ir import Program
from sicompiler.formatters.base import BaseFormatter

_SCHEMA_PATH = Path(__file__).resolve().parent / "program.schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    """Load the program JSON schema, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def program_to_dict(program: Program) -> dict[str, Any]:
    return {
        "variables": [
            {"address": v.address, "value": v.value} for v in program.variables
        ],
        "init": program.init.address,
        "instructions": [
            {"mnemonic": i.mnemonic, "params": list(i.params)} for i in program.instructions
        ],
    }


class ProgramJsonFormatter(BaseFormatter):
    """Formatter that produces the schema-validated JSON program."""

    @property
    def name(self) -> str:
        return "Program JSON"

    def format(self, program: Program) -> str:
        """Render the program as JSON.

        Raises:
            jsonschema.ValidationError: If the generated document does not
                conform to program.schema.json.
        """
        output_dict = program_to_dict(program)
        jsonschema.validate(instance=output_dict, schema=_get_schema())
        return json.dumps(output_dict, indent=2, ensure_ascii=False) + "\n"
