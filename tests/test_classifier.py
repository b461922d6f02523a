from __future__ import annotations

import pytest

from mainseq.errors import ParseError
from mainseq.extractors.go.classifier import DeclarationCounts, classify_source


def test_counts_functions_and_methods() -> None:
    src = b"""package p

type T struct {
	X int
}

func (t *T) Get() int { return t.X }

func New() *T { return &T{} }
"""
    counts = classify_source(src)
    assert counts == DeclarationCounts(concretions=2, abstractions=1)


def test_counts_interfaces_as_abstractions() -> None:
    src = b"""package p

type Reader interface {
	Read(p []byte) (int, error)
}

type Closer interface{}

func Open() {}
"""
    assert classify_source(src) == DeclarationCounts(concretions=1, abstractions=2)


def test_anonymous_types_are_counted() -> None:
    src = b"""package p

func Dump(v interface{}) {
	_ = struct{ A int }{A: 1}
}
"""
    assert classify_source(src) == DeclarationCounts(concretions=1, abstractions=2)


def test_function_literals_are_not_declarations() -> None:
    src = b"""package p

func Run() {
	f := func() {}
	f()
}
"""
    assert classify_source(src).concretions == 1


def test_empty_file_has_no_units() -> None:
    assert classify_source(b"package p\n") == DeclarationCounts()


def test_syntax_error_raises_parse_error_with_path() -> None:
    with pytest.raises(ParseError) as exc_info:
        classify_source(b"package p\n\nfunc broken( {\n", "pkg/broken.go")

    err = exc_info.value
    assert err.path.name == "broken.go"
    assert "pkg/broken.go" in str(err)
    assert err.cause


def test_counts_add_up() -> None:
    total = DeclarationCounts(1, 2) + DeclarationCounts(3, 4)
    assert total == DeclarationCounts(concretions=4, abstractions=6)
