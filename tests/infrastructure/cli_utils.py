"""
Utilities for working with CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs tplroot.cli with specified arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for tplroot.cli

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    # The package may not be installed: make the source tree importable
    src_root = str(Path(__file__).resolve().parents[2])
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src_root, env.get("PYTHONPATH")]))
    env.pop("TPLROOT_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "tplroot.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """Parses JSON from CLI stdout."""
    return json.loads(s)
