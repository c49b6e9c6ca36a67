"""
Source preparation tests: normalization, the tokenizer, class-name
detection, entry-point wrapping and compiler banner stripping.
"""

from __future__ import annotations

from coderunner.executor.source import (
    find_class_name,
    iter_identifiers,
    join_input,
    normalize_source,
    strip_compiler_banner,
    wrap_cpp,
    wrap_csharp,
    wrap_java,
)


def test_normalize_source_strips_bom_and_line_endings():
    assert normalize_source("\ufeffa\r\nb\rc\n") == "a\nb\nc\n"


def test_identifiers_skip_comments_and_literals():
    code = 'int x = 1; // class Foo\n/* main */ String s = "class Bar"; char c = \'y\';'
    assert list(iter_identifiers(code)) == ["int", "x", "String", "s", "char", "c"]


def test_find_class_name_first_match_wins():
    code = "public class Hello { }\nclass Other { }"
    assert find_class_name(code) == "Hello"


def test_find_class_name_defaults_to_main():
    assert find_class_name('System.out.println("class Fake");') == "Main"


def test_find_class_name_accepts_dollar_and_underscore():
    assert find_class_name("class $_Weird1 {}") == "$_Weird1"


def test_class_literal_is_not_a_declaration():
    code = "System.out.println(String.class.getName());"
    assert find_class_name(code) == "Main"
    assert wrap_java(code).startswith("class Main {")


def test_class_literal_before_real_declaration():
    code = "class App { static Object t = App.class; public static void main(String[] a) {} }"
    assert find_class_name(code) == "App"
    assert wrap_java(code) == code


def test_wrap_java_statement():
    wrapped = wrap_java('System.out.println("hi");')
    assert wrapped.startswith("class Main {")
    assert "public static void main(String[] args)" in wrapped
    assert 'System.out.println("hi");' in wrapped


def test_wrap_java_leaves_full_program():
    code = 'public class App { public static void main(String[] a) { System.out.println("x"); } }'
    assert wrap_java(code) == code


def test_wrap_cpp_statement():
    wrapped = wrap_cpp('std::cout << "hi";')
    assert "#include <iostream>" in wrapped
    assert "using namespace std;" in wrapped
    assert 'int main(){\nstd::cout << "hi";;\nreturn 0;\n}' in wrapped


def test_wrap_cpp_leaves_full_program():
    code = '#include <iostream>\nint main() { std::cout << "hi"; }'
    assert wrap_cpp(code) == code


def test_wrap_cpp_ignores_main_inside_string():
    wrapped = wrap_cpp('std::cout << "int main";')
    assert wrapped.startswith("#include <iostream>")


def test_wrap_csharp_statement():
    wrapped = wrap_csharp('Console.WriteLine("hi");')
    assert "using System;" in wrapped
    assert "namespace MyCode" in wrapped
    assert "class Program" in wrapped
    assert "static void Main(string[] args)" in wrapped


def test_wrap_csharp_leaves_full_program():
    code = 'class P { static void Main() { System.Console.WriteLine("x"); } }'
    assert wrap_csharp(code) == code


def test_strip_compiler_banner():
    text = (
        "Microsoft (R) Visual C# Compiler version 4.8\n"
        "Copyright (C) Microsoft Corporation.\n\n"
        "x.cs(3,1): error CS1002: ; expected\n"
    )
    assert strip_compiler_banner(text) == "error CS1002: ; expected\n"


def test_strip_compiler_banner_without_error():
    assert strip_compiler_banner("warning only") == "warning only"


def test_join_input():
    assert join_input([""]) == ""
    assert join_input([]) == ""
    assert join_input(None) == ""
    assert join_input(["1", "2"]) == "1\n2\n"
