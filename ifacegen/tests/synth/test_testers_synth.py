# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from pathlib import PurePosixPath

from ifacegen.parser import parse_source
from ifacegen.symbols import collect_symbols
from ifacegen.synth import conformance_file, render_testers

SOURCE = """package things

type Widget struct{}
type Base struct{}

func (w *Widget) Show() {}
func DoThing() {}
"""


def test_conformance_file_text() -> None:
	table = collect_symbols([parse_source(SOURCE)])
	gen = conformance_file(table, "Things", "example.com/gen", "things")
	assert gen.path == PurePosixPath("things/things_iface_testers.go")
	assert gen.text == (
		"package things\n"
		"\n"
		'import "example.com/gen/things/iface"\n'
		"\n"
		"func init() {\n"
		"  iface.AssertThings(&RealThings{})\n"
		"  iface.AssertBase(&Base{})\n"
		"  iface.AssertWidget(&Widget{})\n"
		"}\n"
	)


def test_testers_without_free_functions() -> None:
	table = collect_symbols([parse_source("package p\ntype Only struct{}\n")])
	assert render_testers(table, "P") == "func init() {\n  iface.AssertOnly(&Only{})\n}\n"


def test_synth_exports_are_not_collected_as_tests() -> None:
	from ifacegen import synth

	assert [name for name in synth.__all__ if name.startswith("test")] == []
