"""
Unified test infrastructure for tplroot.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess
- checking_utils: Shortcuts for checking template snippets
"""

from .file_utils import write, write_sfc
from .cli_utils import run_cli, jload
from .checking_utils import check, messages, lines

__all__ = [
    # File utilities
    "write", "write_sfc",

    # CLI utilities
    "run_cli", "jload",

    # Checking utilities
    "check", "messages", "lines",
]
