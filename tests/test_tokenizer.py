"""Unit tests for section splitting and the section tokenizers.

WHY: Structural errors must be reported as TokenizationError with a
message that points at the problem, before any semantic check runs.

HOW: Tests cover the section count rule, each section's line format,
the empty-file check, and reading from disk via tmp_path.
"""

import pytest

from sicompiler.core.ir import InitDirective, Instruction, Variable
from sicompiler.core.tokenizer import (
    split_sections,
    tokenize,
    tokenize_init,
    tokenize_instructions,
    tokenize_text,
    tokenize_variables,
)
from sicompiler.errors import SicompilerIOError, TokenizationError


class TestSplitSections:
    """Stripped text must split into exactly three '@' sections."""

    def test_three_sections(self):
        assert split_sections("a\n@\nb\n@\nc\n") == ("a\n", "\nb\n", "\nc\n")

    def test_two_sections_rejected(self):
        with pytest.raises(TokenizationError, match="must be 3 but get 2"):
            split_sections("1 0003\n@\n6\n")

    def test_four_sections_rejected(self):
        with pytest.raises(TokenizationError, match="must be 3 but get 4"):
            split_sections("a@b@c@d")

    def test_no_delimiter(self):
        with pytest.raises(TokenizationError, match="must be 3 but get 1"):
            split_sections("ADD 1\nHALT\n")


class TestVariables:
    """Each non-blank line is 'address value'."""

    def test_parses_in_order(self):
        variables = tokenize_variables("1 0003\n3 0000\n")
        assert variables == [Variable("1", "0003"), Variable("3", "0000")]

    def test_blank_and_whitespace_lines_skipped(self):
        variables = tokenize_variables("\n1 0003\n   \n\n3 0000\n")
        assert [v.address for v in variables] == ["1", "3"]

    def test_extra_whitespace_between_tokens(self):
        assert tokenize_variables("1   \t0003") == [Variable("1", "0003")]

    def test_one_token_rejected(self):
        with pytest.raises(TokenizationError, match="Invalid variable format '1'"):
            tokenize_variables("1\n")

    def test_three_tokens_rejected(self):
        with pytest.raises(TokenizationError, match="Invalid variable format"):
            tokenize_variables("1 0003 extra\n")

    def test_empty_section(self):
        assert tokenize_variables("") == []


class TestInit:
    """The init section holds exactly one address."""

    def test_single_address(self):
        assert tokenize_init("\n6\n") == InitDirective("6")

    def test_missing_address(self):
        with pytest.raises(TokenizationError, match="No init section"):
            tokenize_init("\n\n")

    def test_empty_section(self):
        with pytest.raises(TokenizationError, match="No init section"):
            tokenize_init("")

    def test_multiple_addresses(self):
        with pytest.raises(TokenizationError, match="Multiple init addresses"):
            tokenize_init("\n6\n7\n")

    def test_multiple_addresses_on_one_line(self):
        with pytest.raises(TokenizationError, match="get 2: '6 7'"):
            tokenize_init("6 7")


class TestInstructions:
    """First token is the mnemonic, the rest are parameters."""

    def test_parses_mnemonics_and_params(self):
        instructions = tokenize_instructions("\nADD 1\nHALT\n")
        assert instructions == [Instruction("ADD", ("1",)), Instruction("HALT")]

    def test_has_params_follows_params(self):
        add, halt = tokenize_instructions("ADD 1\nHALT")
        assert add.has_params is True
        assert halt.has_params is False

    def test_multiple_params_kept_in_order(self):
        (mov,) = tokenize_instructions("MOV 3 A 1F")
        assert mov.params == ("3", "A", "1F")

    def test_no_repertoire_checks(self):
        """Unknown mnemonics and odd params are accepted at this stage."""
        (instr,) = tokenize_instructions("WHATEVER zz yy")
        assert instr.mnemonic == "WHATEVER"

    def test_blank_lines_skipped(self):
        assert len(tokenize_instructions("\n  \nHALT\n\n")) == 1


class TestTokenizeText:
    """Full text → Program."""

    def test_reference_program(self, sample_program):
        assert tokenize_text("1 0003\n3 0000\n@\n6\n@\nADD 1\nHALT") == sample_program

    def test_empty_text(self):
        with pytest.raises(TokenizationError, match="The file is empty"):
            tokenize_text("")

    def test_whitespace_only_is_not_empty(self):
        """Only a zero-length file is 'empty'; whitespace fails on sections."""
        with pytest.raises(TokenizationError, match="must be 3 but get 1"):
            tokenize_text("\n\n")

    def test_comments_removed_before_splitting(self, sample_program):
        text = (
            "*** header\n"
            "describes the program @ here\n"
            "end ***\n"
            "1 0003 ; counter\n"
            "3 0000\n"
            "@\n"
            "6 ; start\n"
            "@\n"
            "ADD 1 ; @ in a comment\n"
            "HALT\n"
        )
        assert tokenize_text(text) == sample_program

    def test_comment_only_file(self):
        with pytest.raises(TokenizationError, match="must be 3 but get 1"):
            tokenize_text("; nothing here\n")


class TestTokenizeFile:
    """tokenize() reads from disk."""

    def test_reads_file(self, source_file, sample_program):
        assert tokenize(source_file) == sample_program

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(TokenizationError, match="The file is empty"):
            tokenize(path)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        with pytest.raises(SicompilerIOError) as exc_info:
            tokenize(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert str(path) in str(exc_info.value)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\x00@")
        with pytest.raises(SicompilerIOError):
            tokenize(path)


class TestLineBreaks:
    """Only "\\n" ends a line; other whitespace separates tokens."""

    def test_form_feed_separates_variable_tokens(self):
        program = tokenize_text("1\x0c0003\n@\n6\n@\nHALT\n")
        assert program.variables == (Variable("1", "0003"),)

    def test_form_feed_separates_instruction_params(self):
        assert tokenize_instructions("ADD\x0c1\n") == [Instruction("ADD", ("1",))]

    def test_vertical_tab_separates_variable_tokens(self):
        assert tokenize_variables("3\x0b0000\n") == [Variable("3", "0000")]

    def test_crlf_source(self, sample_program):
        text = "1 0003\r\n3 0000\r\n@\r\n6\r\n@\r\nADD 1\r\nHALT\r\n"
        assert tokenize_text(text) == sample_program
