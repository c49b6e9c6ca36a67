"""
Source preparation helpers for compiled languages.

Snippets submitted without an entry point are wrapped in the minimal
boilerplate each toolchain needs.  Detection works on a lightweight
C-family tokenizer rather than raw substring checks, so keywords inside
string literals or comments do not count.  It is not a parser: when a
snippet declares several types the first ``class`` wins.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Optional, Tuple


_TOKEN_RE = re.compile(
    r"""
      (?P<line_comment>//[^\n]*)
    | (?P<block_comment>/\*.*?(?:\*/|\Z))
    | (?P<string>"(?:\\.|[^"\\\n])*"?)
    | (?P<char>'(?:\\.|[^'\\\n])*'?)
    | (?P<ident>[A-Za-z_$][A-Za-z0-9_$]*)
    | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_LITERAL_GROUPS = {"line_comment", "block_comment", "string", "char"}

_CPP_MAIN_RE = re.compile(r"\bint\s+main\b")

JAVA_TEMPLATE = """class Main {{
    public static void main(String[] args) {{
{code}
    }}
}}
"""

CPP_TEMPLATE = """#include <iostream>
using namespace std;
int main(){{
{code};
return 0;
}}
"""

CSHARP_TEMPLATE = """using System;
namespace MyCode {{
    class Program {{
        static void Main(string[] args){{
{code}
        }}
    }}
}}
"""


def normalize_source(code: str) -> str:
    """Drop a leading BOM and convert line endings to ``\\n``."""
    if code.startswith("\ufeff"):
        code = code[1:]
    return code.replace("\r\n", "\n").replace("\r", "\n")


def iter_identifiers(code: str) -> Iterator[str]:
    """Yield identifiers and keywords, skipping comments and literals."""
    for match in _TOKEN_RE.finditer(code):
        if match.lastgroup == "ident":
            yield match.group()


def strip_literals(code: str) -> str:
    """Blank out comments and string/char literals, keeping everything else."""
    return "".join(
        " " if match.lastgroup in _LITERAL_GROUPS else match.group()
        for match in _TOKEN_RE.finditer(code)
    )


def _significant_tokens(code: str) -> Iterator[Tuple[str, str]]:
    for match in _TOKEN_RE.finditer(code):
        kind = match.lastgroup
        text = match.group()
        if kind in ("line_comment", "block_comment") or text.isspace():
            continue
        yield kind, text


def _unqualified_tokens(code: str) -> Iterator[Tuple[str, str]]:
    """Yield significant tokens, dropping identifiers reached through ``.``.

    ``String.class`` is a class literal, not a declaration.
    """
    previous = ""
    for kind, text in _significant_tokens(code):
        if not (kind == "ident" and previous == "."):
            yield kind, text
        previous = text


def find_class_name(code: str, default: str = "Main") -> str:
    tokens = _unqualified_tokens(code)
    for kind, text in tokens:
        if kind == "ident" and text == "class":
            kind, text = next(tokens, ("", ""))
            if kind == "ident":
                return text
    return default


def _has_any(code: str, names: Iterable[str]) -> bool:
    wanted = set(names)
    return any(kind == "ident" and text in wanted for kind, text in _unqualified_tokens(code))


def wrap_java(code: str) -> str:
    if _has_any(code, ("class", "main")):
        return code
    return JAVA_TEMPLATE.format(code=code)


def wrap_cpp(code: str) -> str:
    if _CPP_MAIN_RE.search(strip_literals(code)):
        return code
    return CPP_TEMPLATE.format(code=code)


def wrap_csharp(code: str) -> str:
    if _has_any(code, ("namespace", "class", "Main")):
        return code
    return CSHARP_TEMPLATE.format(code=code)


def strip_compiler_banner(text: str) -> str:
    """Drop tool banner text preceding the first ``error`` diagnostic."""
    index = text.find("error")
    if index == -1:
        return text
    return text[index:]


def join_input(lines: Optional[List[str]]) -> str:
    """Join stdin lines, newline-terminated when there is any content."""
    if not lines:
        return ""
    data = "\n".join(lines)
    if data and not data.endswith("\n"):
        data += "\n"
    return data
