"""Multi-language code runner.

Accepts a snippet of JavaScript, Python, C#, Java or C++, compiles it
where needed, runs it and returns what it printed.  The package is
organised as follows:

* ``config`` – configuration handling for environment variables.
* ``errors`` – the error taxonomy and error text extraction.
* ``executor`` – the process runner, workspaces and per-language executors.
* ``dispatcher`` – language routing and the string-returning entry point.
* ``models`` – Pydantic models defining request and response schemas.
* ``api`` – FastAPI application exposing HTTP endpoints.
"""

from .dispatcher import SUPPORTED_LANGUAGES, Dispatcher
from .errors import ErrorKind, UnsupportedLanguageError
from .executor import ExecutionResult

__all__ = [
    "Dispatcher",
    "ErrorKind",
    "ExecutionResult",
    "SUPPORTED_LANGUAGES",
    "UnsupportedLanguageError",
]
