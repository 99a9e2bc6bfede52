"""Output layouts known to the compiler, keyed by --format name.

The CLI offers these keys as the choices for ``-f``, and
write_program() resolves its ``output_format`` argument here. Entries
are classes. The serializer builds a fresh instance for every write.

"canonical" is the loader's layout and the default; "json" is the
schema-checked structured dump.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sicompiler.formatters.canonical import CanonicalFormatter
from sicompiler.formatters.program_json import ProgramJsonFormatter

if TYPE_CHECKING:
    from sicompiler.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "canonical": CanonicalFormatter,
    "json": ProgramJsonFormatter,
}
