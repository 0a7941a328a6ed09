from lsprotocol.types import DiagnosticSeverity, Position

from mola.builtin.env_builtin import BUILTIN_SIGNATURES
from mola_lsp.indexer import ReaderProblem, SymbolRef, build_index
from mola_lsp.server import collect_diagnostics, completion_items, extract_word_at, hover_text


def test_index_heads():
    idx = build_index("(+ 1 2)\n  (foo 3)\n(1 2)\n; done")
    assert idx.heads == [SymbolRef("+", 0, 1), SymbolRef("foo", 1, 3)]
    assert idx.problems == []
    assert idx.paren_balance == 0
    assert idx.form_count == 3


def test_index_unterminated_list():
    idx = build_index("(+ 1 2")
    assert idx.problems == [
        ReaderProblem('")" missing in list declaration; unexpectedly found end of token stream', 0, 5, 1)
    ]
    assert idx.paren_balance == 1


def test_index_unknown_atom_position():
    idx = build_index("(+ 1 2)\n(+ 1 1.5)")
    assert idx.problems == [ReaderProblem('unknown atomic type token: "1.5"', 1, 5, 3)]
    # forms before the error are still indexed
    assert idx.heads == [SymbolRef("+", 0, 1)]


def test_index_comment_only():
    idx = build_index("; nothing here\n")
    assert idx.problems == []
    assert idx.form_count == 0


# -----------------------------------------------------
# Server helpers
# -----------------------------------------------------

def test_collect_diagnostics():
    diags = collect_diagnostics(build_index("(+ 1"))
    assert [d.severity for d in diags] == [DiagnosticSeverity.Error, DiagnosticSeverity.Warning]
    assert diags[0].range.start.line == 0
    assert diags[0].range.start.character == 3
    assert collect_diagnostics(build_index("(+ 1 2)")) == []


def test_hover_text():
    idx = build_index("(+ 1 2)\n(foo 3)")
    assert hover_text("+", idx) == BUILTIN_SIGNATURES["+"]
    assert hover_text("foo", idx) == "foo (first applied at 2:2)"
    assert hover_text("bar", idx) is None


def test_completion_items():
    labels = [item.label for item in completion_items(build_index("(foo 1)\n(+ 1 2)"))]
    assert labels == ["+", "-", "*", "/", "foo"]
    assert [item.label for item in completion_items(None)] == ["+", "-", "*", "/"]


def test_extract_word_at():
    assert extract_word_at("(foo 1)", Position(line=0, character=2)) == "foo"
    assert extract_word_at("(foo 1)", Position(line=3, character=0)) is None
    # positions past the end of the line clamp to the line end
    assert extract_word_at("(foo 1) bar", Position(line=0, character=20)) == "bar"
    assert extract_word_at("(foo 1)", Position(line=0, character=20)) is None
