"""
Ephemeral per-execution workspaces.

A workspace is a uniquely named directory created right before a
compiled-language execution and removed recursively afterwards on every
exit path.  Names are random UUIDs so that concurrent executions never
share a directory.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from ..errors import WorkspaceError


logger = logging.getLogger(__name__)


@contextmanager
def open_workspace(root: Union[str, Path] = ".") -> Iterator[Path]:
    """Create a fresh workspace under ``root`` and remove it on exit."""
    path = Path(root) / uuid.uuid4().hex
    try:
        path.mkdir(parents=True)
    except OSError as exc:
        raise WorkspaceError(f"Unable to create workspace {path}: {exc}") from exc
    logger.debug("Created workspace %s", path)
    try:
        yield path
    finally:
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise WorkspaceError(f"Unable to remove workspace {path}: {exc}") from exc
        logger.debug("Removed workspace %s", path)


def write_source(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WorkspaceError(f"Unable to write {path.name}: {exc}") from exc
