"""Package entry point for ``python -m sicompiler``.

WHY: Users run the compiler as ``python -m sicompiler program.txt``
without installing the console script. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() and exits with its status.
"""

import sys

from sicompiler.cli import main

if __name__ == "__main__":
    sys.exit(main())
