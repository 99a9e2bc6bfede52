"""Shared test fixtures for the sicompiler test suite.

WHY: Most test modules need the same small program, the same two-entry
repertoire, and a way to drop them on disk. Centralizing them keeps the
reference scenario identical everywhere.

HOW: Module constants hold the reference source/repertoire text and the
expected canonical output. Fixtures write them under tmp_path and build
the matching IR objects.

RULES:
- SAMPLE_SOURCE / SAMPLE_OUTPUT are the reference pair from the
  language description (ADD with one parameter, HALT with none)
- All file I/O goes through tmp_path for isolation
"""

from pathlib import Path

import pytest

from sicompiler.core.ir import InitDirective, Instruction, Program, Repertoire, Variable


SAMPLE_SOURCE = "1 0003\n3 0000\n@\n6\n@\nADD 1\nHALT"

SAMPLE_OUTPUT = "1 0003\n3 0000\n@\n6\n@\nADD 1\nHALT \n"

SAMPLE_REPERTOIRE = "Test machine\n$\nADD AC <- AC + M[IR.addr]\nHALT stop\n$\nADD true\nHALT false\n"


def write_file(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def source_file(tmp_path):
    """The reference program written to disk."""
    return write_file(tmp_path, "program.txt", SAMPLE_SOURCE)


@pytest.fixture
def repertoire_file(tmp_path):
    """The reference repertoire (ADD true, HALT false) written to disk."""
    return write_file(tmp_path, "machine.rep", SAMPLE_REPERTOIRE)


@pytest.fixture
def output_file(tmp_path):
    """Output path inside tmp_path (not created)."""
    return tmp_path / "out.txt"


@pytest.fixture
def sample_repertoire():
    """Repertoire IR matching SAMPLE_REPERTOIRE."""
    return Repertoire({
        "ADD": Instruction.template("ADD", True),
        "HALT": Instruction.template("HALT", False),
    })


@pytest.fixture
def sample_program():
    """Program IR matching SAMPLE_SOURCE."""
    return Program(
        variables=(Variable("1", "0003"), Variable("3", "0000")),
        init=InitDirective("6"),
        instructions=(Instruction("ADD", ("1",)), Instruction("HALT")),
    )


@pytest.fixture
def expected_output():
    """Canonical output for the reference program."""
    return SAMPLE_OUTPUT
