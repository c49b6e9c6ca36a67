"""
Executor for running Python code snippets.

The snippet is handed to the system interpreter with ``-c`` as a single
argument, so no file or workspace is involved.  Output is decoded with a
legacy single-byte codec rather than UTF‑8 to match the interpreter's
console encoding on the hosts this service was built for; the codec can
be changed through configuration.
"""

from __future__ import annotations

from typing import Optional

from .base import CodeExecutor


class PythonExecutor(CodeExecutor):
    """Execute Python code using the ``python`` found on ``PATH``."""

    language = "python"
    default_encoding = "latin-1"

    async def _execute(
        self,
        code: str,
        stdin: Optional[str],
        entry_point: Optional[str],
    ) -> str:
        return await self._run("python", ["-c", code])
