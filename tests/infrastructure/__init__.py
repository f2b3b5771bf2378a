"""
Shared test infrastructure.

Modules:
- file_utils: writing table files into temporary directories
- cli_utils: running the CLI in a subprocess
"""

from .file_utils import write, write_tables
from .cli_utils import run_cli, jload

__all__ = ["write", "write_tables", "run_cli", "jload"]
