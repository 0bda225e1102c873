# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from ifacegen.core.diagnostics import Diagnostic
from ifacegen.core.span import Span
from ifacegen.driver import GenerateOptions, generate, write_files
from ifacegen.errors import GenerationError
from ifacegen.namespaces import DEFAULT_NAMESPACES, NamespaceConfigError, NamespaceTable


class _ArgumentParser(argparse.ArgumentParser):
	def error(self, message: str):  # type: ignore[override]
		# Usage errors exit 1, like every other failure of the tool.
		self.print_usage(sys.stderr)
		self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
	p = _ArgumentParser(
		prog="ifacegen",
		description="Generate Go interfaces, a forwarding implementation and conformance checks for a package",
	)
	p.add_argument("source_dir", type=Path, help="Directory of the Go package to scan")
	p.add_argument("iface_name", help="Contract name for the package's free functions")
	p.add_argument("package_root", help="Import path prefix of the generated package (e.g. github.com/acme/wrap)")
	p.add_argument("package_name", help="Name of the generated package")
	p.add_argument("out_dir", type=Path, help="Output directory; files go under <out_dir>/<package_name>")
	p.add_argument(
		"--namespaces",
		type=Path,
		default=None,
		help="JSON namespace rewrite table (default: built-in gotk3 table)",
	)
	p.add_argument(
		"--json",
		action="store_true",
		help="Emit diagnostics as JSON (phase/message/severity/file/line/column)",
	)
	p.add_argument("-v", "--verbose", action="store_true", help="Report every written file on stderr")
	return p


def _report(diagnostics: List[Diagnostic], as_json: bool) -> int:
	if as_json:
		payload = {
			"exit_code": 1,
			"diagnostics": [d.to_dict() for d in diagnostics],
		}
		print(json.dumps(payload))
	else:
		for d in diagnostics:
			print(d.format_human(), file=sys.stderr)
	return 1


def main(argv: list[str] | None = None) -> int:
	"""
	Scan <source_dir> and write the generated files under
	<out_dir>/<package_name>. Returns 1 on any diagnostic or fatal
	generation error; nothing is written in that case.
	"""
	args = _build_parser().parse_args(argv)

	namespaces = DEFAULT_NAMESPACES
	if args.namespaces is not None:
		try:
			namespaces = NamespaceTable.load(args.namespaces)
		except NamespaceConfigError as err:
			diag = Diagnostic(message=str(err), phase="config", span=Span(file=str(args.namespaces)))
			return _report([diag], args.json)

	options = GenerateOptions(
		source_dir=args.source_dir,
		iface_name=args.iface_name,
		package_root=args.package_root,
		package_name=args.package_name,
		out_dir=args.out_dir,
		namespaces=namespaces,
	)
	try:
		files, diagnostics = generate(options)
	except GenerationError as err:
		diag = Diagnostic(message=str(err), phase="generate", span=Span.from_loc(err.loc, str(args.source_dir)))
		return _report([diag], args.json)
	if diagnostics:
		return _report(diagnostics, args.json)

	written = write_files(options.out_dir, files)
	if args.verbose:
		for path in written:
			print(f"wrote {path}", file=sys.stderr)
	if args.json:
		print(json.dumps({"exit_code": 0, "files": [str(p) for p in written], "diagnostics": []}))
	return 0
