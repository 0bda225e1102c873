# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from ifacegen.parser import parse_source
from ifacegen.render import RenderContext
from ifacegen.signatures import concrete_signature, contract_signature, expand_params, forwarding_call


def _decl(line: str):
	return parse_source(f"package p\n{line}\n").funcs[0]


def _ctx() -> RenderContext:
	return RenderContext(known_types={"Widget"}, contract_import="example.com/gen/p/iface")


def test_contract_and_concrete_signatures() -> None:
	decl = _decl("func Wrap(w *Widget, opts ...string) map[string]*Widget { return nil }")
	ctx = _ctx()
	assert contract_signature(decl, ctx) == "Wrap(Widget, ...string) map[string]Widget"
	assert ctx.import_lines() == []
	assert concrete_signature(decl, ctx) == "Wrap(w iface.Widget, opts ...string) map[string]iface.Widget"
	assert ctx.import_lines() == ['import "example.com/gen/p/iface"']
	assert forwarding_call(decl) == "return Wrap(w, opts...)"


def test_grouped_names_are_expanded() -> None:
	decl = _decl("func Pair(a, b int) (x, y int) { return a, b }")
	ctx = _ctx()
	assert contract_signature(decl, ctx) == "Pair(int, int) (int, int)"
	assert concrete_signature(decl, ctx) == "Pair(a int, b int) (int, int)"
	assert forwarding_call(decl) == "return Pair(a, b)"


def test_unnamed_and_blank_params_get_positional_names() -> None:
	decl = _decl("func Sum(int, int) int { return 0 }")
	assert [p.name for p in expand_params(decl.type.params)] == ["arg0", "arg1"]
	assert concrete_signature(decl, _ctx()) == "Sum(arg0 int, arg1 int) int"
	assert forwarding_call(decl) == "return Sum(arg0, arg1)"

	blank = _decl("func Pick(_ string, n int, _ bool) {}")
	assert [p.name for p in expand_params(blank.type.params)] == ["arg0", "n", "arg2"]
	assert forwarding_call(blank) == "Pick(arg0, n, arg2)"


def test_no_results_means_no_return() -> None:
	decl = _decl("func Init() {}")
	assert contract_signature(decl, _ctx()) == "Init()"
	assert concrete_signature(decl, _ctx()) == "Init()"
	assert forwarding_call(decl) == "Init()"


def test_function_typed_parameter() -> None:
	decl = _decl("func On(name string, cb func(*Widget, int) bool) {}")
	assert contract_signature(decl, _ctx()) == "On(string, func(Widget, int) bool)"
	assert concrete_signature(decl, _ctx()) == "On(name string, cb func(iface.Widget, int) bool)"


def test_external_types_in_signatures() -> None:
	decl = _decl("func (w *Widget) Attach(parent *gtk.Window, kids []*gtk.Widget) *gtk.Box { return nil }")
	ctx = _ctx()
	assert contract_signature(decl, ctx) == "Attach(gtk_iface.Window, []gtk_iface.Widget) gtk_iface.Box"
	assert ctx.import_lines() == ['import gtk_iface "github.com/gotk3/gotk3/gtk/iface"']


def test_positional_names_avoid_declared_names() -> None:
	decl = _decl("func F(_ int, arg0 string) {}")
	assert [p.name for p in expand_params(decl.type.params)] == ["arg1", "arg0"]
	assert concrete_signature(decl, _ctx()) == "F(arg1 int, arg0 string)"
	assert forwarding_call(decl) == "F(arg1, arg0)"

	crowded = _decl("func G(_ int, _ string, arg1 bool) {}")
	assert [p.name for p in expand_params(crowded.type.params)] == ["arg0", "arg2", "arg1"]
