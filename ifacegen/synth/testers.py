# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Conformance tester: an `init` that passes a zero value of every discovered
type to its contract's Assert function, turning "does the implementation
still match the contract" into a compile error of the package.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ifacegen.render import CONTRACT_PACKAGE
from ifacegen.symbols import SymbolTable

from .files import GeneratedFile, contract_import_path, go_source
from .forwarding import real_type_name


def render_testers(table: SymbolTable, iface_name: str) -> str:
	lines = ["func init() {"]
	for entry in table.sorted_entries():
		if entry.is_global:
			contract, value = iface_name, real_type_name(iface_name)
		else:
			contract, value = entry.name, entry.name
		lines.append(f"  {CONTRACT_PACKAGE}.Assert{contract}(&{value}{{}})")
	lines.append("}")
	return "\n".join(lines) + "\n"


def conformance_file(table: SymbolTable, iface_name: str, package_root: str, package_name: str) -> GeneratedFile:
	imports = [f'import "{contract_import_path(package_root, package_name)}"']
	return GeneratedFile(
		path=PurePosixPath(package_name, f"{package_name}_iface_testers.go"),
		text=go_source(package_name, imports, render_testers(table, iface_name)),
	)


__all__ = ["render_testers", "conformance_file"]
