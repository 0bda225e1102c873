# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Forwarding implementation for the free functions of a package.

`Real<IName>` has one method per exported free function, each forwarding to
the function itself, so `Real` structurally implements the `<IName>`
contract without declaring it.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ifacegen.render import RenderContext
from ifacegen.signatures import concrete_signature, forwarding_call
from ifacegen.symbols import TypeEntry

from .files import GeneratedFile, go_source


def real_type_name(iface_name: str) -> str:
	return f"Real{iface_name}"


def render_forwarding(entry: TypeEntry, iface_name: str, ctx: RenderContext) -> str:
	real = real_type_name(iface_name)
	parts = [
		f"type {real} struct{{}}",
		f"var Real = &{real}{{}}",
	]
	for decl in entry.sorted_operations():
		parts.append(
			f"func (*{real}) {concrete_signature(decl, ctx)} {{\n"
			f"  {forwarding_call(decl)}\n"
			"}"
		)
	return "\n\n".join(parts) + "\n"


def forwarding_file(entry: TypeEntry, iface_name: str, ctx: RenderContext, package_name: str) -> GeneratedFile:
	body = render_forwarding(entry, iface_name, ctx)
	return GeneratedFile(
		path=PurePosixPath(package_name, f"real_{package_name}.go"),
		text=go_source(package_name, ctx.import_lines(), body),
	)


__all__ = ["real_type_name", "render_forwarding", "forwarding_file"]
