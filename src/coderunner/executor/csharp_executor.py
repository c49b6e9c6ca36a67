"""
Executor for C# snippets.

``csc`` is told where to write the assembly with ``-out:`` so the
artifact lands directly in the workspace; nothing is staged in the
current directory.  The compiler prints a banner before its diagnostics,
which is stripped from error text.  C# is the only language that
receives standard input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import Command, CompiledExecutor
from .source import strip_compiler_banner, wrap_csharp


class CSharpExecutor(CompiledExecutor):
    """Compile with ``csc`` and run the produced executable."""

    language = "csharp"
    default_encoding = "cp866"
    source_suffix = ".cs"
    accepts_stdin = True

    def prepare_source(self, code: str) -> str:
        return wrap_csharp(code)

    @staticmethod
    def artifact_path(source_path: Path, workspace: Path) -> Path:
        return workspace / f"{source_path.stem}.exe"

    def compile_command(self, source_path: Path, workspace: Path) -> Command:
        artifact = self.artifact_path(source_path, workspace)
        return "csc", [f"-out:{artifact}", str(source_path)]

    def run_command(
        self,
        source_path: Path,
        workspace: Path,
        code: str,
        entry_point: Optional[str],
    ) -> Command:
        return str(self.artifact_path(source_path, workspace)), []

    def clean_diagnostics(self, text: str) -> str:
        return strip_compiler_banner(text)
