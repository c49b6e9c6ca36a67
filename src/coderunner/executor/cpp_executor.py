"""
Executor for C++ snippets.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import Command, CompiledExecutor
from .source import wrap_cpp


ARTIFACT_NAME = "a.exe"


class CppExecutor(CompiledExecutor):
    """Compile with ``g++`` into the workspace and run the binary."""

    language = "cpp"
    source_suffix = ".cpp"

    def prepare_source(self, code: str) -> str:
        return wrap_cpp(code)

    def compile_command(self, source_path: Path, workspace: Path) -> Command:
        return "g++", [str(source_path), "-o", str(workspace / ARTIFACT_NAME)]

    def run_command(
        self,
        source_path: Path,
        workspace: Path,
        code: str,
        entry_point: Optional[str],
    ) -> Command:
        return str(workspace / ARTIFACT_NAME), []
