"""Configuration defaults and .env loading.

WHY: The repertoire path, output path, output format, and log level are
the only knobs the compiler has. Keeping their defaults in one place,
overridable from the environment, means a lab machine can point every
run at its own repertoire without touching command lines.

HOW: python-dotenv loads the .env file on import. Defaults are module
constants read from os.environ with fallbacks. resolve_repertoire_path()
picks the explicit path or the configured default and checks it exists.

RULES:
- SICOMPILER_REPERTOIRE overrides the bundled default repertoire
- SICOMPILER_OUTPUT defaults to "out.txt"
- SICOMPILER_OUTPUT_FORMAT defaults to "canonical"
- SICOMPILER_LOG_LEVEL defaults to "WARNING"
- An explicit path always wins over the environment
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from sicompiler.errors import SicompilerIOError

# Load .env from the directory the compiler is run from
load_dotenv()

BUNDLED_REPERTOIRE_PATH = Path(__file__).resolve().parent / "data" / "default-repertoire.rep"
"""Repertoire shipped with the package, used when nothing else is configured."""

DEFAULT_REPERTOIRE_PATH = os.getenv("SICOMPILER_REPERTOIRE", str(BUNDLED_REPERTOIRE_PATH))
DEFAULT_OUTPUT_PATH = os.getenv("SICOMPILER_OUTPUT", "out.txt")
DEFAULT_OUTPUT_FORMAT = os.getenv("SICOMPILER_OUTPUT_FORMAT", "canonical")
DEFAULT_LOG_LEVEL = os.getenv("SICOMPILER_LOG_LEVEL", "WARNING").upper()


def resolve_repertoire_path(path: Optional[str | Path] = None) -> Path:
    """Return the repertoire file to load.

    RULES:
    - An explicit ``path`` is used as given
    - Otherwise DEFAULT_REPERTOIRE_PATH (environment or bundled file)
    - Raises SicompilerIOError if the chosen file does not exist
    """
    resolved = Path(path) if path else Path(DEFAULT_REPERTOIRE_PATH)
    if not resolved.is_file():
        raise SicompilerIOError(resolved)
    return resolved
