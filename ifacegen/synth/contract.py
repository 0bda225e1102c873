# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Contract synthesizer: one Go interface per discovered type.

	type Widget interface {
	    Base

	    Hide()
	    Show() error
	} // end of Widget

	func AssertWidget(_ Widget) {}

The Assert function does nothing at run time; calling it with a candidate
value makes the Go compiler check that the value satisfies the contract.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ifacegen.core.naming import go_file_name
from ifacegen.render import CONTRACT, CONTRACT_PACKAGE, RenderContext, render_type
from ifacegen.signatures import contract_signature
from ifacegen.symbols import TypeEntry

from .files import GeneratedFile, go_source

INDENT = "    "


def render_contract(name: str, entry: TypeEntry, ctx: RenderContext) -> str:
	lines = [f"type {name} interface {{"]
	# Embedding order is meaningful; parents are never re-sorted.
	for parent in entry.parents:
		lines.append(INDENT + render_type(parent, CONTRACT, ctx))
	operations = entry.sorted_operations()
	if entry.parents and operations:
		lines.append("")
	for decl in operations:
		lines.append(INDENT + contract_signature(decl, ctx))
	lines.append(f"}} // end of {name}")
	lines.append("")
	lines.append(f"func Assert{name}(_ {name}) {{}}")
	return "\n".join(lines) + "\n"


def contract_file(name: str, entry: TypeEntry, ctx: RenderContext, package_name: str) -> GeneratedFile:
	"""Render the contract file for `entry` under the name `name`."""
	body = render_contract(name, entry, ctx)
	return GeneratedFile(
		path=PurePosixPath(package_name, CONTRACT_PACKAGE, go_file_name(name)),
		text=go_source(CONTRACT_PACKAGE, ctx.import_lines(), body),
	)


__all__ = ["INDENT", "render_contract", "contract_file"]
