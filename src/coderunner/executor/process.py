"""
Asynchronous child process helper shared by every executor.

The runner spawns exactly one process per call with an argument list
(never through a shell), drains stdout and stderr concurrently while
decoding each chunk with the requested encoding, optionally writes a
single block of standard input and then closes the stream.  There is
no timeout: a process that never exits keeps the awaiting
coroutine pending.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import ProcessFailedError, SpawnError


logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096


@dataclass
class CompileResult:
    """Both streams captured from a compiler invocation."""

    stdout: str
    stderr: str


async def _drain(stream: asyncio.StreamReader, encoding: str) -> str:
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    parts: List[str] = []
    while True:
        chunk = await stream.read(CHUNK_SIZE)
        if not chunk:
            break
        parts.append(decoder.decode(chunk))
    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


async def _feed(stdin: asyncio.StreamWriter, data: bytes) -> None:
    try:
        stdin.write(data)
        await stdin.drain()
    except (BrokenPipeError, ConnectionResetError):
        # The child exited without reading its input; its exit status
        # and stderr still describe what happened.
        logger.debug("Child closed stdin before reading %d bytes", len(data))
    finally:
        stdin.close()


class ProcessRunner:
    """Spawn commands and collect their decoded output."""

    async def _spawn(
        self,
        command: str,
        args: Sequence[str],
        encoding: str,
        stdin_input: Optional[str],
    ) -> Tuple[str, str, Optional[int]]:
        logger.debug("Spawning %s with %d argument(s)", command, len(args))
        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdin=asyncio.subprocess.PIPE if stdin_input is not None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise SpawnError(f"Failed to start {command}: {exc}") from exc

        tasks = [
            _drain(process.stdout, encoding),
            _drain(process.stderr, encoding),
        ]
        if stdin_input is not None:
            tasks.append(_feed(process.stdin, stdin_input.encode(encoding, errors="replace")))
        stdout, stderr = (await asyncio.gather(*tasks))[:2]
        exit_code = await process.wait()
        logger.debug("%s exited with status %s", command, exit_code)
        return stdout, stderr, exit_code

    async def run(
        self,
        command: str,
        args: Sequence[str],
        encoding: str = "utf-8",
        stdin_input: Optional[str] = None,
    ) -> str:
        """Run ``command`` and return its standard output.

        Raises :class:`ProcessFailedError` on a non-zero exit and
        :class:`SpawnError` when the command cannot be started.
        """
        stdout, stderr, exit_code = await self._spawn(command, args, encoding, stdin_input)
        if exit_code != 0:
            raise ProcessFailedError(stdout, stderr, exit_code)
        return stdout

    async def run_capturing_both(
        self,
        command: str,
        args: Sequence[str],
        encoding: str = "utf-8",
    ) -> CompileResult:
        """Run a compiler and return both of its streams.

        A zero exit resolves even when stderr is non-empty; deciding what
        that means is left to the caller.
        """
        stdout, stderr, exit_code = await self._spawn(command, args, encoding, None)
        if exit_code != 0:
            raise ProcessFailedError(stdout, stderr, exit_code)
        return CompileResult(stdout=stdout, stderr=stderr)
