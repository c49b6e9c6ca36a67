"""
Execution backends for the supported languages.

The dispatcher selects one of these executors by language name.
Interpreted languages hand the snippet straight to their interpreter;
compiled languages share :class:`CompiledExecutor`, which writes the
snippet into an ephemeral workspace, compiles it, runs the artifact and
removes the workspace.  Additional languages can be added by implementing
the ``CodeExecutor`` interface from ``base.py``.
"""

from .base import CodeExecutor, CompiledExecutor, ExecutionResult
from .cpp_executor import CppExecutor
from .csharp_executor import CSharpExecutor
from .java_executor import JavaExecutor
from .javascript_executor import JavaScriptExecutor
from .process import CompileResult, ProcessRunner
from .python_executor import PythonExecutor

__all__ = [
    "CodeExecutor",
    "CompiledExecutor",
    "CompileResult",
    "CppExecutor",
    "CSharpExecutor",
    "ExecutionResult",
    "JavaExecutor",
    "JavaScriptExecutor",
    "ProcessRunner",
    "PythonExecutor",
]
