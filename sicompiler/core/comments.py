"""Comment removal for program source text.

WHY: Source files mix code with ``;`` line comments and ``*** ... ***``
block comments. The section splitter and tokenizers must never see
comment text, otherwise a stray ``@`` inside a comment would change the
section count.

HOW: Two passes over the lines. The first trims every non-blank line
and cuts it at the first ``;``. The second drops every line from a line
starting with ``***`` up to and including the next line ending with
``***``, tracking a single in-comment flag.

RULES:
- Line comments are removed before block comments
- Non-blank lines are trimmed of surrounding whitespace
- Fully blank lines are kept verbatim
- Block delimiter lines are dropped along with everything between them
- A line that starts with ``***`` always opens a block, even if it also
  ends with ``***``
- An unterminated block silently swallows the rest of the text
- Pure functions, no I/O
"""

from __future__ import annotations

from typing import List

LINE_COMMENT = ";"
BLOCK_DELIMITER = "***"


def split_lines(text: str) -> List[str]:
    """Split text into lines on "\n" only, dropping a trailing "\r" per line.

    Form feed, vertical tab, and the other characters str.splitlines()
    treats as line breaks stay inside the line. A final "\n" does not
    produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def strip_line_comments(text: str) -> str:
    """Trim each line and cut it at the first ``;``."""
    lines = []
    for line in split_lines(text):
        trimmed = line.strip()
        if not trimmed:
            lines.append(line)
            continue
        index = trimmed.find(LINE_COMMENT)
        lines.append(trimmed[:index] if index >= 0 else trimmed)
    return "\n".join(lines)


def strip_block_comments(text: str) -> str:
    """Drop ``***``-delimited blocks, delimiter lines included.

    Every kept line is newline-terminated in the result.
    """
    result = []
    in_comment = False
    for line in split_lines(text):
        trimmed = line.strip()
        if trimmed.startswith(BLOCK_DELIMITER):
            in_comment = True
            continue
        if trimmed.endswith(BLOCK_DELIMITER):
            in_comment = False
            continue
        if not in_comment:
            result.append(line + "\n")
    return "".join(result)


def strip_comments(text: str) -> str:
    """Remove line comments, then block comments, from raw source text."""
    return strip_block_comments(strip_line_comments(text))
