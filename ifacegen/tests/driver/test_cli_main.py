# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
from pathlib import Path

import pytest

from ifacegen.cli import main


def _package(tmp_path: Path, files: dict) -> Path:
	src = tmp_path / "src"
	src.mkdir()
	for name, text in files.items():
		(src / name).write_text(text, encoding="utf-8")
	return src


def _argv(src: Path, out: Path, *extra: str) -> list:
	return [str(src), "Things", "example.com/gen", "things", str(out), *extra]


def test_missing_arguments_exit_1(capsys) -> None:
	with pytest.raises(SystemExit) as exc:
		main(["src", "Things", "example.com/gen", "things"])
	assert exc.value.code == 1
	assert "usage:" in capsys.readouterr().err


def test_generates_files(tmp_path: Path, capsys) -> None:
	src = _package(tmp_path, {"t.go": 'package things\nfunc DoThing(x int) (string, error) { return "", nil }\n'})
	out = tmp_path / "out"
	assert main(_argv(src, out, "-v")) == 0
	assert (out / "things" / "iface" / "things.go").is_file()
	assert (out / "things" / "real_things.go").read_text(encoding="utf-8").endswith(
		"func (*RealThings) DoThing(x int) (string, error) {\n  return DoThing(x)\n}\n"
	)
	assert (out / "things" / "things_iface_testers.go").is_file()
	err = capsys.readouterr().err
	assert err.count("wrote ") == 3


def test_parse_failure_exit_1_and_nothing_written(tmp_path: Path, capsys) -> None:
	src = _package(
		tmp_path,
		{
			"good.go": "package things\nfunc Ok() {}\n",
			"bad.go": "package things\nfunc Broken( {}\n",
		},
	)
	out = tmp_path / "out"
	assert main(_argv(src, out)) == 1
	assert not out.exists()
	err = capsys.readouterr().err
	assert "bad.go:2:" in err
	assert ": error: " in err


def test_parse_failure_as_json(tmp_path: Path, capsys) -> None:
	src = _package(tmp_path, {"bad.go": "package things\nfunc Broken( {}\n"})
	assert main(_argv(src, tmp_path / "out", "--json")) == 1
	payload = json.loads(capsys.readouterr().out)
	assert payload["exit_code"] == 1
	[diag] = payload["diagnostics"]
	assert diag["phase"] == "parser"
	assert diag["file"].endswith("bad.go")
	assert diag["line"] == 2


def test_unsupported_type_exit_1(tmp_path: Path, capsys) -> None:
	src = _package(tmp_path, {"f.go": "package things\nfunc Fixed(b [4]byte) {}\n"})
	out = tmp_path / "out"
	assert main(_argv(src, out)) == 1
	assert not out.exists()
	err = capsys.readouterr().err
	assert "f.go:2:" in err
	assert "unsupported array length" in err


def test_success_as_json(tmp_path: Path, capsys) -> None:
	src = _package(tmp_path, {"t.go": "package things\nfunc Ping() {}\n"})
	assert main(_argv(src, tmp_path / "out", "--json")) == 0
	payload = json.loads(capsys.readouterr().out)
	assert payload["exit_code"] == 0
	assert payload["diagnostics"] == []
	assert len(payload["files"]) == 3


def test_custom_namespace_table(tmp_path: Path) -> None:
	src = _package(tmp_path, {"t.go": "package things\nfunc Use(w *acme.Window, g *gtk.Widget) {}\n"})
	ns = tmp_path / "ns.json"
	ns.write_text(
		json.dumps({"namespaces": {"acme": {"import": "example.com/acme", "contract_import": "example.com/acme/iface"}}}),
		encoding="utf-8",
	)
	out = tmp_path / "out"
	assert main(_argv(src, out, "--namespaces", str(ns))) == 0
	contract = (out / "things" / "iface" / "things.go").read_text(encoding="utf-8")
	assert 'import acme_iface "example.com/acme/iface"\n' in contract
	assert 'import "gtk"\n' in contract
	assert "    Use(acme_iface.Window, *gtk.Widget)\n" in contract


def test_bad_namespace_table(tmp_path: Path, capsys) -> None:
	src = _package(tmp_path, {"t.go": "package things\nfunc Ping() {}\n"})
	ns = tmp_path / "ns.json"
	ns.write_text('{"namespaces": []}', encoding="utf-8")
	out = tmp_path / "out"
	assert main(_argv(src, out, "--namespaces", str(ns))) == 1
	assert not out.exists()
	assert "ns.json" in capsys.readouterr().err
