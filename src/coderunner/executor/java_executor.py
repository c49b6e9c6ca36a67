"""
Executor for Java snippets.

Statements without a class are wrapped into ``class Main`` with a
``main`` method.  The class to launch is the explicit entry point when
one is given, otherwise the first class declared in the submitted
snippet, otherwise ``Main``.  The source file is named after that class
because ``javac`` insists on it for public classes; the workspace already
keeps the name unique.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..errors import CompileError
from .base import Command, CompiledExecutor
from .source import find_class_name, wrap_java


_CLASS_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class JavaExecutor(CompiledExecutor):
    """Compile with ``javac`` and launch the class with ``java``."""

    language = "java"
    default_encoding = "cp1252"
    source_suffix = ".java"

    def main_class(self, code: str, entry_point: Optional[str]) -> str:
        if not entry_point:
            return find_class_name(code)
        if not _CLASS_NAME_RE.fullmatch(entry_point):
            raise CompileError(stderr=f"Invalid entry point: {entry_point!r} is not a Java class name")
        return entry_point

    def prepare_source(self, code: str) -> str:
        return wrap_java(code)

    def source_name(self, code: str, entry_point: Optional[str]) -> str:
        return f"{self.main_class(code, entry_point)}{self.source_suffix}"

    def compile_command(self, source_path: Path, workspace: Path) -> Command:
        return "javac", [str(source_path)]

    def run_command(
        self,
        source_path: Path,
        workspace: Path,
        code: str,
        entry_point: Optional[str],
    ) -> Command:
        return "java", ["-cp", str(workspace), self.main_class(code, entry_point)]
