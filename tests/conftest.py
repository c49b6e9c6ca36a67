"""Shared fixtures: a recording fake of the process runner and toolchain markers."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Optional

import pytest

from coderunner.executor import CompileResult


def requires(tool: str):
    """Skip a test when ``tool`` is not on PATH."""
    return pytest.mark.skipif(shutil.which(tool) is None, reason=f"{tool} not installed")


class FakeRunner:
    """Stand-in for ``ProcessRunner`` that records calls instead of spawning.

    Source files passed to the compiler are read while the workspace
    still exists so tests can inspect what would have been compiled.
    """

    def __init__(
        self,
        run_output: str = "",
        compile_result: Optional[CompileResult] = None,
        compile_error: Optional[Exception] = None,
        run_error: Optional[Exception] = None,
    ) -> None:
        self.run_output = run_output
        self.compile_result = compile_result or CompileResult(stdout="", stderr="")
        self.compile_error = compile_error
        self.run_error = run_error
        self.compile_calls: List[tuple] = []
        self.run_calls: List[tuple] = []
        self.sources: List[str] = []
        self.source_paths: List[Path] = []

    async def run_capturing_both(self, command, args, encoding="utf-8"):
        self.compile_calls.append((command, list(args), encoding))
        for arg in args:
            path = Path(arg)
            if path.is_file():
                self.source_paths.append(path)
                self.sources.append(path.read_text(encoding="utf-8"))
        if self.compile_error is not None:
            raise self.compile_error
        return self.compile_result

    async def run(self, command, args, encoding="utf-8", stdin_input=None):
        self.run_calls.append((command, list(args), encoding, stdin_input))
        if self.run_error is not None:
            raise self.run_error
        return self.run_output


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(run_output="hi\n")
