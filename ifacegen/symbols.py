# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Symbol table of discovered types.

Exported functions are grouped by the base name of their receiver type
(pointer and value receivers share one entry); free functions go to the
`<global>` bucket. Exported struct types record their embedded fields as
parent contracts and become *known types* for the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ifacegen.core.diagnostics import Diagnostic
from ifacegen.errors import GenerationError
from ifacegen.parser import parse_go_package
from ifacegen.parser.ast import (
	Field,
	FuncDecl,
	Ident,
	ImportSpec,
	PointerType,
	SourceFile,
	StructType,
	TypeNode,
	TypeSpec,
	is_exported,
)

GLOBAL = "<global>"


@dataclass
class TypeEntry:
	name: str
	definition: Optional[StructType] = None
	parents: List[TypeNode] = field(default_factory=list)
	# Discovery order; sorted only when rendered.
	operations: List[FuncDecl] = field(default_factory=list)

	@property
	def is_global(self) -> bool:
		return self.name == GLOBAL

	def add_operation(self, decl: FuncDecl) -> None:
		self.operations.append(decl)

	def add_parent(self, parent: TypeNode) -> None:
		self.parents.append(parent)

	def sorted_operations(self) -> List[FuncDecl]:
		return sorted(self.operations, key=lambda d: d.name)


class SymbolTable:
	def __init__(self) -> None:
		self.entries: Dict[str, TypeEntry] = {}
		self.known_types: Set[str] = set()
		# Package name → import path over every scanned file; first import wins.
		self.imports: Dict[str, str] = {}

	def __contains__(self, name: str) -> bool:
		return name in self.entries

	def __len__(self) -> int:
		return len(self.entries)

	def __iter__(self) -> Iterator[TypeEntry]:
		return iter(self.sorted_entries())

	def get(self, name: str) -> Optional[TypeEntry]:
		return self.entries.get(name)

	def get_or_create(self, name: str) -> TypeEntry:
		entry = self.entries.get(name)
		if entry is None:
			entry = TypeEntry(name=name)
			self.entries[name] = entry
		return entry

	@property
	def global_entry(self) -> Optional[TypeEntry]:
		return self.entries.get(GLOBAL)

	def sorted_entries(self) -> List[TypeEntry]:
		"""Entries by name; this order is what makes the output reproducible."""
		return [self.entries[name] for name in sorted(self.entries)]

	def add_file(self, source: SourceFile) -> None:
		for spec in source.imports:
			name = imported_name(spec)
			if name is not None:
				self.imports.setdefault(name, spec.path)
		for decl in source.decls:
			if isinstance(decl, FuncDecl):
				self._add_func(decl)
			elif isinstance(decl, TypeSpec):
				self._add_type(decl)

	def _add_func(self, decl: FuncDecl) -> None:
		if not is_exported(decl.name):
			return
		name = GLOBAL if decl.recv is None else receiver_type_name(decl.recv)
		self.get_or_create(name).add_operation(decl)

	def _add_type(self, spec: TypeSpec) -> None:
		if spec.alias or not is_exported(spec.name) or not isinstance(spec.type, StructType):
			return
		entry = self.get_or_create(spec.name)
		self.known_types.add(spec.name)
		entry.definition = spec.type
		for f in spec.type.fields:
			if f.is_embedded:
				entry.add_parent(f.type)


def imported_name(spec: ImportSpec) -> Optional[str]:
	"""Name an import binds in the file; None for dot and blank imports."""
	if spec.name in {".", "_"}:
		return None
	return spec.name or spec.path.rsplit("/", 1)[-1]


def receiver_type_name(recv: Field) -> str:
	"""Base type name of `(r *T)` or `(r T)`."""
	typ = recv.type
	if isinstance(typ, PointerType):
		typ = typ.elem
	if isinstance(typ, Ident):
		return typ.name
	raise GenerationError("unsupported receiver type", loc=recv.loc)


def collect_symbols(files: Iterable[SourceFile]) -> SymbolTable:
	table = SymbolTable()
	for source in files:
		table.add_file(source)
	return table


def collect_symbols_from_dir(directory: Path) -> Tuple[Optional[SymbolTable], List[Diagnostic]]:
	files, diagnostics = parse_go_package(directory)
	if diagnostics:
		return None, diagnostics
	return collect_symbols(files), []


__all__ = [
	"GLOBAL",
	"TypeEntry",
	"SymbolTable",
	"imported_name",
	"receiver_type_name",
	"collect_symbols",
	"collect_symbols_from_dir",
]
