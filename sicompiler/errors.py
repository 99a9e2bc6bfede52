"""Error taxonomy for the compiler pipeline.

WHY: Callers (the CLI, tests, embedding tools) need to tell apart a
missing file, a structurally broken source, and a program that parses
but breaks a semantic rule. A small closed hierarchy makes that a
single ``except`` clause per category.

HOW: SicompilerError is the common base. Exactly three subclasses exist:
SicompilerIOError (file access, keeps the path and the cause),
TokenizationError (structure/lexing), ValidationError (semantic gates).
``str()`` prefixes the category so CLI output is self-describing.

RULES:
- Every error raised by the pipeline is one of the three subclasses
- ``message`` holds the bare human-readable text (no category prefix)
- Errors are terminal for a run; nothing in the package retries
"""

from __future__ import annotations

from pathlib import Path


class SicompilerError(Exception):
    """Base class for all pipeline errors."""

    category = "Error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return "{}: {}".format(self.category, self.message)


class SicompilerIOError(SicompilerError):
    """A file could not be read or written.

    Attributes:
        path: The file the pipeline was trying to access.
        cause: The underlying OSError or decode error, if any.
    """

    category = "I/O error"

    def __init__(self, path: str | Path, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        if cause is not None:
            detail = getattr(cause, "strerror", None) or str(cause)
            message = "{}: {}".format(self.path, detail)
        else:
            message = "{}: file not found".format(self.path)
        super().__init__(message)


class TokenizationError(SicompilerError):
    """The source or repertoire file is structurally malformed."""

    category = "Tokenization error"


class ValidationError(SicompilerError):
    """The parsed program breaks a semantic rule."""

    category = "Validation error"
