"""Error taxonomy for the execution pipeline.

Every failure the pipeline knows about is a :class:`CodeRunnerError`
subclass tagged with an :class:`ErrorKind`.  Strategies raise these
internally and convert them into a failed
:class:`~coderunner.executor.base.ExecutionResult` at their boundary, so
callers only ever see text.
"""

from __future__ import annotations

import enum
from typing import Optional


GENERIC_FAILURE = "Code execution failed"
UNKNOWN_ERROR = "Unknown error"


class ErrorKind(str, enum.Enum):
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    COMPILE = "compile"
    RUNTIME = "runtime"
    SPAWN = "spawn"
    WORKSPACE = "workspace"
    INTERNAL = "internal"


class CodeRunnerError(Exception):
    """Base class for pipeline errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class UnsupportedLanguageError(CodeRunnerError):
    kind = ErrorKind.UNSUPPORTED_LANGUAGE

    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class CompileError(CodeRunnerError):
    """The compiler failed or wrote diagnostics to its error stream.

    Both captured streams are kept; :func:`describe_error` prefers stdout
    because some compilers (``csc``) print their diagnostics there.
    """

    kind = ErrorKind.COMPILE

    def __init__(self, stdout: str = "", stderr: str = "") -> None:
        super().__init__(stderr or stdout or GENERIC_FAILURE)
        self.stdout = stdout
        self.stderr = stderr


class ProgramRuntimeError(CodeRunnerError):
    kind = ErrorKind.RUNTIME


class SpawnError(CodeRunnerError):
    kind = ErrorKind.SPAWN


class WorkspaceError(CodeRunnerError):
    kind = ErrorKind.WORKSPACE


class ProcessFailedError(CodeRunnerError):
    """A child process exited with a non-zero status."""

    def __init__(
        self,
        stdout: str,
        stderr: str,
        exit_code: Optional[int],
    ) -> None:
        super().__init__(stderr or GENERIC_FAILURE)
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code


def describe_error(exc: BaseException) -> str:
    """Pick the text shown to the caller for ``exc``.

    Priority: captured stdout, captured stderr, the exception message,
    then a generic fallback.
    """
    if isinstance(exc, CompileError):
        if exc.stdout:
            return exc.stdout
        if exc.stderr:
            return exc.stderr
    message = str(exc)
    return message or UNKNOWN_ERROR
