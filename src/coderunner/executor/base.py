"""
Base interfaces and dataclasses for language executors.

All concrete executors inherit from :class:`CodeExecutor`.  Interpreted
languages implement :meth:`CodeExecutor._execute` directly; compiled
languages inherit from :class:`CompiledExecutor`, which drives the shared
workspace → write → compile → run sequence and only asks subclasses for
their toolchain commands.

Executors never raise pipeline errors to their caller.  Whatever happens
inside is folded into an :class:`ExecutionResult` whose ``output`` is the
text a user should see and whose ``error_kind`` says whether (and how) the
execution failed.
"""

from __future__ import annotations

import abc
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import (
    CodeRunnerError,
    CompileError,
    ErrorKind,
    ProcessFailedError,
    ProgramRuntimeError,
    describe_error,
)
from .process import ProcessRunner
from .source import normalize_source
from .workspace import open_workspace, write_source


Command = Tuple[str, List[str]]


@dataclass
class ExecutionResult:
    """Outcome of running a code snippet.

    Attributes
    ----------
    output: str
        Captured standard output on success, the extracted error text
        otherwise.
    error_kind: ErrorKind, optional
        ``None`` on success.
    duration_ms: int
        Wall‑clock time spent in the executor, in milliseconds.
    """

    output: str
    error_kind: Optional[ErrorKind] = None
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class CodeExecutor(abc.ABC):
    """
    Abstract base class defining the interface for code executors.

    Subclasses set :attr:`language` and :attr:`default_encoding` and
    override :meth:`_execute`.
    """

    language: str = ""
    default_encoding: str = "utf-8"
    accepts_stdin: bool = False

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """
        Parameters
        ----------
        runner: ProcessRunner, optional
            Spawns the toolchain processes.  Tests inject a fake here.
        encoding: str, optional
            Codec used to decode the program's output (and encode its
            input).  Defaults to :attr:`default_encoding`.
        """
        self.runner = runner or ProcessRunner()
        self.encoding = encoding or self.default_encoding

    async def execute(
        self,
        code: str,
        stdin: Optional[str] = None,
        entry_point: Optional[str] = None,
    ) -> ExecutionResult:
        """Run ``code`` and report the outcome.

        Parameters
        ----------
        code: str
            The user supplied source text.
        stdin: str, optional
            Data fed to the program on standard input.  Ignored by
            executors that do not accept input.
        entry_point: str, optional
            Explicit entry-point symbol for languages that need one.
        """
        start_time = time.perf_counter()
        error_kind: Optional[ErrorKind] = None
        try:
            output = await self._execute(
                code,
                stdin if self.accepts_stdin else None,
                entry_point,
            )
        except CodeRunnerError as exc:
            output = describe_error(exc)
            error_kind = exc.kind
        duration = int((time.perf_counter() - start_time) * 1000)
        return ExecutionResult(output, error_kind, duration)

    @abc.abstractmethod
    async def _execute(
        self,
        code: str,
        stdin: Optional[str],
        entry_point: Optional[str],
    ) -> str:
        raise NotImplementedError

    async def _run(
        self,
        command: str,
        args: Sequence[str],
        stdin: Optional[str] = None,
    ) -> str:
        """Run the user's program, mapping a non-zero exit to a runtime error."""
        try:
            return await self.runner.run(command, args, self.encoding, stdin)
        except ProcessFailedError as exc:
            raise ProgramRuntimeError(str(exc)) from exc


class CompiledExecutor(CodeExecutor):
    """
    Shared lifecycle for languages that compile before running.

    The workspace is opened with :func:`open_workspace`, so it is removed
    whether compilation fails, the program fails or something unexpected
    is raised.
    """

    source_suffix: str = ""

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        encoding: Optional[str] = None,
        workspace_root: Union[str, Path] = ".",
    ) -> None:
        super().__init__(runner, encoding)
        self.workspace_root = workspace_root

    def prepare_source(self, code: str) -> str:
        """Return the source to compile, wrapping it when needed."""
        return code

    def source_name(self, code: str, entry_point: Optional[str]) -> str:
        return f"{uuid.uuid4().hex}{self.source_suffix}"

    @abc.abstractmethod
    def compile_command(self, source_path: Path, workspace: Path) -> Command:
        raise NotImplementedError

    @abc.abstractmethod
    def run_command(
        self,
        source_path: Path,
        workspace: Path,
        code: str,
        entry_point: Optional[str],
    ) -> Command:
        raise NotImplementedError

    def clean_diagnostics(self, text: str) -> str:
        return text

    async def _compile(self, source_path: Path, workspace: Path) -> None:
        command, args = self.compile_command(source_path, workspace)
        try:
            result = await self.runner.run_capturing_both(command, args, self.encoding)
        except ProcessFailedError as exc:
            raise CompileError(
                stdout=self.clean_diagnostics(exc.stdout),
                stderr=self.clean_diagnostics(exc.stderr),
            ) from exc
        # Diagnostics on a successful exit are still surfaced as the result.
        if result.stderr:
            raise CompileError(stderr=self.clean_diagnostics(result.stderr))

    async def _execute(
        self,
        code: str,
        stdin: Optional[str],
        entry_point: Optional[str],
    ) -> str:
        source = self.prepare_source(normalize_source(code))
        with open_workspace(self.workspace_root) as workspace:
            source_path = workspace / self.source_name(code, entry_point)
            write_source(source_path, source)
            await self._compile(source_path, workspace)
            command, args = self.run_command(source_path, workspace, code, entry_point)
            return await self._run(command, args, stdin)
