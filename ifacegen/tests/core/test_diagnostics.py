# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest
from lark.exceptions import UnexpectedInput

from ifacegen.core.diagnostics import Diagnostic
from ifacegen.core.span import Span
from ifacegen.parser import parse_source
from ifacegen.parser.ast import Located


def test_format_human() -> None:
	diag = Diagnostic(message="boom", phase="parser", span=Span(file="a.go", line=3, column=7))
	assert diag.format_human() == "a.go:3:7: error: boom"


def test_format_human_unknown_position() -> None:
	diag = Diagnostic(message="boom", phase="generate")
	assert diag.format_human() == "<unknown>:?:?: error: boom"
	assert diag.format_human("pkg") == "pkg:?:?: error: boom"


def test_span_from_ast_location() -> None:
	span = Span.from_loc(Located(line=2, column=5, file="w.go"))
	assert (span.file, span.line, span.column) == ("w.go", 2, 5)
	assert Span.from_loc(None) == Span()
	assert Span.from_loc(None, "pkg") == Span(file="pkg")
	assert Span.from_loc(Located(line=2, column=5), "fallback.go").file == "fallback.go"


def test_to_dict() -> None:
	diag = Diagnostic(message="bad", phase="config", span=Span(file="ns.json"), notes=["see docs"])
	assert diag.to_dict() == {
		"phase": "config",
		"message": "bad",
		"severity": "error",
		"file": "ns.json",
		"line": None,
		"column": None,
		"notes": ["see docs"],
	}


def test_span_from_lark_error() -> None:
	with pytest.raises(UnexpectedInput) as exc:
		parse_source("package p\n\nfunc F( {}\n")
	span = Span.from_loc(exc.value, "f.go")
	assert (span.file, span.line) == ("f.go", 3)
	assert span.format_position().startswith("3:")


def test_span_drops_unknown_positions() -> None:
	class EndOfInput:
		line = "?"
		column = "?"

	span = Span.from_loc(EndOfInput(), "f.go")
	assert (span.line, span.column) == (None, None)
	assert span.format_position() == "?:?"
