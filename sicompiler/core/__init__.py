"""Core tokenizing, validation, and serialization modules.

WHY: The core package holds the parts of the compiler with real
invariants: the IR dataclasses, the comment stripper, the section
tokenizers, the repertoire loader, the validation gates, and the
serializer. The CLI is only glue around them.

HOW: ir.py defines the data structures, comments.py and tokenizer.py
build a Program from source text, repertoire.py builds the mnemonic
table, validator.py runs the gates, serializer.py writes the result
through a registered formatter.

RULES:
- IR dataclasses are the contract: change with care
- Tokenizing is purely syntactic; repertoire checks live in the validator
- Only serializer.py opens the output file
"""
