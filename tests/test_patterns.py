"""Tests for shared textual patterns and the brace-depth span finder."""

import pytest

from sharpcheck.patterns import (
    contains_collection,
    contains_loop,
    first_magic_literal,
    has_assignment_or_comparison,
    is_brace_only,
    is_class_declaration,
    is_comment_line,
    is_documentation_line,
    is_field_declaration,
    is_subroutine_signature,
    subroutine_name,
)
from sharpcheck.spans import find_body_end

# ------------------------------------------------------------------
# Signature pattern
# ------------------------------------------------------------------


@pytest.mark.parametrize("line", [
    "public void Run()",
    "    private static int Add(int a, int b)",
    "protected List<string> Names(Dictionary<string, int> map)",
    "internal int[] Scores()",
])
def test_subroutine_signature_recognized(line):
    assert is_subroutine_signature(line)


def test_modifiers_other_than_static_not_recognized():
    assert not is_subroutine_signature("public override string ToString()")
    assert not is_subroutine_signature("public async Task<int> Load()")


@pytest.mark.parametrize("line", [
    "void Run()",
    "public int count;",
    "public void Run(",
    "Run();",
    "public class Program",
])
def test_non_signatures(line):
    assert not is_subroutine_signature(line)


@pytest.mark.parametrize("line", [
    "private int count;",
    "public const int Max = 10;",
    "private static readonly Bitmap Logo = Load();",
    "protected List<int> items = new List<int>();",
])
def test_field_declaration_recognized(line):
    assert is_field_declaration(line)


@pytest.mark.parametrize("line", [
    "int count;",
    "public void Run()",
    "private int count",
])
def test_non_fields(line):
    assert not is_field_declaration(line)


def test_subroutine_name():
    assert subroutine_name("public static void Main(string[] args)") == "Main"
    assert subroutine_name("private List<int> loadAll ()") == "loadAll"
    assert subroutine_name("public int count;") is None


# ------------------------------------------------------------------
# Predicates
# ------------------------------------------------------------------

def test_comment_predicates():
    assert is_comment_line("// note")
    assert is_comment_line("/* note")
    assert not is_comment_line("x = 1; // note")
    assert is_documentation_line("/// <summary>")
    assert is_documentation_line("*/")
    assert not is_documentation_line("/* open")


def test_class_declaration_is_whole_word():
    assert is_class_declaration("public sealed class Shop")
    assert not is_class_declaration("var subclassed = true;")


def test_first_magic_literal():
    assert first_magic_literal("x = 0 + 1 + 7 + 8") == "7"
    assert first_magic_literal("x = 0") is None
    assert first_magic_literal("vec3 = v2") is None


def test_assignment_or_comparison():
    assert has_assignment_or_comparison("a = b")
    assert has_assignment_or_comparison("a >= b")
    assert has_assignment_or_comparison("List<int>")
    assert not has_assignment_or_comparison("Call(5)")


def test_whole_text_searches():
    assert contains_collection("int[] a;")
    assert not contains_collection("int a;")
    assert contains_loop("while (true)")
    assert contains_loop("for\n(")
    assert not contains_loop("foreach item")


def test_brace_only():
    assert is_brace_only("{}}{")
    assert not is_brace_only("{ }")
    assert not is_brace_only("")


# ------------------------------------------------------------------
# Brace-depth span finder
# ------------------------------------------------------------------

class TestFindBodyEnd:
    def test_simple_body(self):
        lines = ["void A()", "{", "x();", "}", "after"]
        assert find_body_end(lines, 0) == 3

    def test_nested_body(self):
        lines = ["void A()", "{", "if (x)", "{", "}", "}"]
        assert find_body_end(lines, 0) == 5

    def test_open_and_close_on_signature_line(self):
        assert find_body_end(["void A() { }", "next"], 0) == 0

    def test_unterminated(self):
        assert find_body_end(["void A()", "{", "x();"], 0) is None

    def test_no_braces_at_all(self):
        assert find_body_end(["void A();", "x();"], 0) is None

    def test_start_offset(self):
        lines = ["{", "}", "void B()", "{", "}"]
        assert find_body_end(lines, 2) == 4

    def test_start_past_end(self):
        assert find_body_end(["{", "}"], 5) is None
