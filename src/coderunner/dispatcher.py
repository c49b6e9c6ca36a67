"""
Language dispatcher.

Maps a language name onto its executor and runs the snippet.  Two entry
points are offered: :meth:`Dispatcher.execute` returns the tagged
:class:`~coderunner.executor.ExecutionResult`, while
:meth:`Dispatcher.compile_and_execute` keeps the plain-string contract
where failures are reported as text.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

from .config import Config
from .errors import ErrorKind, UNKNOWN_ERROR, UnsupportedLanguageError
from .executor import (
    CodeExecutor,
    CppExecutor,
    CSharpExecutor,
    ExecutionResult,
    JavaExecutor,
    JavaScriptExecutor,
    ProcessRunner,
    PythonExecutor,
)
from .executor.source import join_input


logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("javascript", "python", "csharp", "java", "cpp")


class Dispatcher:
    """Route execution requests to the executor for their language."""

    def __init__(self, executors: Iterable[CodeExecutor]) -> None:
        self.executors: Dict[str, CodeExecutor] = {e.language: e for e in executors}

    @classmethod
    def from_config(
        cls,
        config: Config,
        runner: Optional[ProcessRunner] = None,
    ) -> "Dispatcher":
        runner = runner or ProcessRunner()
        enc = config.encodings
        root = config.workspace_root
        return cls(
            [
                JavaScriptExecutor(runner, enc["javascript"]),
                PythonExecutor(runner, enc["python"]),
                CSharpExecutor(runner, enc["csharp"], workspace_root=root),
                JavaExecutor(runner, enc["java"], workspace_root=root),
                CppExecutor(runner, enc["cpp"], workspace_root=root),
            ]
        )

    def executor_for(self, language: str) -> CodeExecutor:
        key = (language or "").lower()
        executor = self.executors.get(key)
        if executor is None:
            raise UnsupportedLanguageError(language)
        return executor

    async def execute(
        self,
        language: str,
        code: str,
        input: Optional[List[str]] = None,
        entry_point: Optional[str] = None,
    ) -> ExecutionResult:
        """Run ``code`` and return the tagged outcome.

        Raises :class:`UnsupportedLanguageError` before anything is spawned
        when ``language`` is unknown.  Every other failure is returned as a
        failed result.
        """
        executor = self.executor_for(language)
        stdin = join_input(input) if executor.accepts_stdin else None
        logger.info("Dispatching %s snippet (%d chars)", executor.language, len(code))
        start_time = time.perf_counter()
        try:
            result = await executor.execute(code, stdin, entry_point)
        except Exception as exc:
            logger.exception("Unexpected error while executing %s code", executor.language)
            duration = int((time.perf_counter() - start_time) * 1000)
            return ExecutionResult(str(exc) or UNKNOWN_ERROR, ErrorKind.INTERNAL, duration)
        if result.ok:
            logger.info("%s execution succeeded in %d ms", executor.language, result.duration_ms)
        else:
            logger.info(
                "%s execution failed (%s) in %d ms",
                executor.language,
                result.error_kind.value,
                result.duration_ms,
            )
        return result

    async def compile_and_execute(
        self,
        language: str,
        code: str,
        input: Optional[List[str]] = None,
    ) -> str:
        if input is None:
            input = [""]
        result = await self.execute(language, code, input)
        return result.output
