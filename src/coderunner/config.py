"""Configuration loader.

The service reads its configuration from environment variables so the
same image can run in different contexts.  Defaults are chosen so that
local development works out of the box.

Environment variables:

``CODERUNNER_API_KEY``
    Shared secret expected in the ``x‑api‑key`` header.  When empty the
    check is skipped.

``CODERUNNER_WORKSPACE_ROOT``
    Directory under which per-execution workspaces are created.  Defaults
    to the current working directory.

``CODERUNNER_ENCODING_<LANGUAGE>``
    Codec used to decode a language's output, e.g.
    ``CODERUNNER_ENCODING_PYTHON=utf-8``.  Defaults are ``utf-8`` for
    JavaScript and C++, ``latin-1`` for Python, ``cp1252`` for Java and
    ``cp866`` for C#.

``CODERUNNER_LOG_LEVEL``
    Level of the ``coderunner`` logger.  Defaults to ``INFO``.

``PORT``
    The port on which the API server listens.  Defaults to 8080.

Toolchain executables (``node``, ``python``, ``javac``, ``java``,
``g++``, ``csc``) are looked up on ``PATH`` and are not configurable.
"""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, field
from typing import Dict


DEFAULT_ENCODINGS: Dict[str, str] = {
    "javascript": "utf-8",
    "python": "latin-1",
    "csharp": "cp866",
    "java": "cp1252",
    "cpp": "utf-8",
}


def _encoding_var(language: str) -> str:
    name = f"CODERUNNER_ENCODING_{language.upper()}"
    value = os.getenv(name, DEFAULT_ENCODINGS[language])
    try:
        codecs.lookup(value)
    except LookupError:
        raise ValueError(f"Invalid encoding for {name}: {value}")
    return value


@dataclass
class Config:
    """Centralised configuration object."""

    api_key: str = ""
    workspace_root: str = "."
    encodings: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ENCODINGS))
    log_level: str = "INFO"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Config":
        api_key = os.getenv("CODERUNNER_API_KEY", "")
        workspace_root = os.getenv("CODERUNNER_WORKSPACE_ROOT", ".")

        encodings = {language: _encoding_var(language) for language in DEFAULT_ENCODINGS}

        log_level = os.getenv("CODERUNNER_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid CODERUNNER_LOG_LEVEL: {log_level}")

        port_env = os.getenv("PORT")
        try:
            port = int(port_env) if port_env is not None else 8080
        except ValueError:
            raise ValueError(f"Invalid integer for PORT: {port_env}")

        return cls(
            api_key=api_key,
            workspace_root=workspace_root,
            encodings=encodings,
            log_level=log_level,
            port=port,
        )
