"""
Utilities for working with the CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs ctg.cli with the given arguments in the given directory.

    Args:
        root: Working directory of the command
        *args: Command line arguments

    Returns:
        CompletedProcess with the execution results
    """
    env = os.environ.copy()
    env.pop("CTG_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "ctg.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)
