"""
Executor for running JavaScript snippets with Node.js.
"""

from __future__ import annotations

from typing import Optional

from .base import CodeExecutor


class JavaScriptExecutor(CodeExecutor):
    """Evaluate JavaScript with ``node -e``."""

    language = "javascript"

    async def _execute(
        self,
        code: str,
        stdin: Optional[str],
        entry_point: Optional[str],
    ) -> str:
        return await self._run("node", ["-e", code])
