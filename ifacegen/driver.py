# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generation pipeline: source directory → symbol table → generated files.

Everything is rendered in memory first; files are written only once every
one of them rendered, so a fatal error never leaves partial output behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from ifacegen.core.diagnostics import Diagnostic
from ifacegen.namespaces import DEFAULT_NAMESPACES, NamespaceTable
from ifacegen.render import RenderContext
from ifacegen.symbols import SymbolTable, collect_symbols_from_dir
from ifacegen.synth import GeneratedFile, conformance_file, contract_file, forwarding_file
from ifacegen.synth.files import contract_import_path


@dataclass(frozen=True)
class GenerateOptions:
	source_dir: Path
	iface_name: str
	package_root: str
	package_name: str
	out_dir: Path
	namespaces: NamespaceTable = DEFAULT_NAMESPACES


def _new_context(table: SymbolTable, options: GenerateOptions) -> RenderContext:
	return RenderContext(
		known_types=frozenset(table.known_types),
		namespaces=options.namespaces,
		contract_import=contract_import_path(options.package_root, options.package_name),
		source_imports=table.imports,
	)


def generate_from_table(table: SymbolTable, options: GenerateOptions) -> List[GeneratedFile]:
	"""
	Render all files for `table`: contracts for discovered types, the global
	contract and its forwarding implementation, then the tester file.
	"""
	files: List[GeneratedFile] = []
	for entry in table.sorted_entries():
		if not entry.is_global:
			files.append(contract_file(entry.name, entry, _new_context(table, options), options.package_name))
	global_entry = table.global_entry
	if global_entry is not None:
		files.append(contract_file(options.iface_name, global_entry, _new_context(table, options), options.package_name))
		files.append(forwarding_file(global_entry, options.iface_name, _new_context(table, options), options.package_name))
	files.append(conformance_file(table, options.iface_name, options.package_root, options.package_name))
	return files


def generate(options: GenerateOptions) -> Tuple[List[GeneratedFile], List[Diagnostic]]:
	"""
	Parse `options.source_dir` and render its files.

	Parse problems come back as diagnostics; unsupported declaration shapes
	raise GenerationError.
	"""
	table, diagnostics = collect_symbols_from_dir(options.source_dir)
	if table is None:
		return [], diagnostics
	return generate_from_table(table, options), []


def write_files(out_dir: Path, files: List[GeneratedFile]) -> List[Path]:
	written: List[Path] = []
	for gen in files:
		target = out_dir.joinpath(*gen.path.parts)
		target.parent.mkdir(parents=True, exist_ok=True)
		target.write_text(gen.text, encoding="utf-8")
		written.append(target)
	return written


__all__ = ["GenerateOptions", "generate_from_table", "generate", "write_files"]
