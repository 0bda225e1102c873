# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Go declaration parser.

Parses the `.go` files of one package directory into
`ifacegen.parser.ast.SourceFile` records, collecting diagnostics instead of
throwing so callers can report every broken file at once.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from lark.exceptions import UnexpectedInput

from ifacegen.core.diagnostics import Diagnostic
from ifacegen.core.span import Span

from . import ast
from .parser import GoSyntaxError, parse_source


def is_source_file(path: Path) -> bool:
	"""Package sources: `*.go`, minus tests and version-gated `_since_` files."""
	name = path.name
	return name.endswith(".go") and not name.endswith("_test.go") and "_since_" not in name


def parse_go_file(path: Path) -> Tuple[Optional[ast.SourceFile], List[Diagnostic]]:
	try:
		source = path.read_text(encoding="utf-8")
	except OSError as err:
		return None, [Diagnostic(message=str(err), phase="parser", span=Span(file=str(path)))]
	try:
		return parse_source(source, str(path)), []
	except GoSyntaxError as err:
		return None, [Diagnostic(message=str(err), phase="parser", span=Span.from_loc(err.loc, str(path)))]
	except UnexpectedInput as err:
		return None, [Diagnostic(message=str(err).strip(), phase="parser", span=Span.from_loc(err, str(path)))]


def parse_go_package(directory: Path) -> Tuple[List[ast.SourceFile], List[Diagnostic]]:
	"""
	Parse every package source in `directory` (non-recursive).

	Files are visited in sorted name order so diagnostics and discovery order
	are stable across file systems.
	"""
	if not directory.is_dir():
		return [], [Diagnostic(message=f"not a directory: {directory}", phase="parser", span=Span(file=str(directory)))]
	files: List[ast.SourceFile] = []
	diagnostics: List[Diagnostic] = []
	for path in sorted(p for p in directory.iterdir() if p.is_file() and is_source_file(p)):
		parsed, diags = parse_go_file(path)
		diagnostics.extend(diags)
		if parsed is not None:
			files.append(parsed)
	return files, diagnostics


__all__ = [
	"ast",
	"GoSyntaxError",
	"is_source_file",
	"parse_source",
	"parse_go_file",
	"parse_go_package",
]
