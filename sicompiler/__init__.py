"""SiCompiler: front end for a small pseudo-assembly language.

WHY: Programs for the teaching machine are written by hand as plain text
with comments, variables, a start address, and an instruction stream.
The downstream assembler/loader only accepts a strict canonical layout
and has no error reporting of its own. This package checks the source
against the machine's instruction repertoire and emits that layout.

HOW: Three-stage pipeline: tokenize (source text → Program IR), load
the repertoire (repertoire file → mnemonic table), validate and
serialize (gates over the IR, then one write through a formatter).
Each stage is independently testable.

RULES:
- The Program IR is the stable contract between tokenizing and writing
- Every failure is a SicompilerError subclass; nothing is retried
- Output is written only after every validation gate passes
"""

__version__ = "0.1.0"
