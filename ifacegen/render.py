# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type renderer: turns type-expression nodes back into Go source text.

Rendering runs in one of three modes (see RenderMode) and records every
namespace the emitted text refers to in the RenderContext, so the caller can
produce the import block of the file being emitted. The context is passed
explicitly; every emitted file gets a fresh one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, List, Mapping, Optional, Sequence, Set

from ifacegen.errors import UnsupportedTypeError
from ifacegen.namespaces import DEFAULT_NAMESPACES, NamespaceTable
from ifacegen.parser.ast import (
	ArrayType,
	Ellipsis,
	Field,
	FuncType,
	Ident,
	InterfaceType,
	MapType,
	PointerType,
	QualifiedName,
	TypeNode,
	VARIADIC_LEN,
)

# Package (and directory) holding the generated contracts.
CONTRACT_PACKAGE = "iface"


@dataclass(frozen=True)
class RenderMode:
	# Qualify known local types with the contract package (`iface.Widget`).
	local_contracts: bool
	# Rewrite known external namespaces to their contract alias (`gtk_iface`).
	external_contracts: bool

	@property
	def targets_contracts(self) -> bool:
		return self.local_contracts or self.external_contracts


PLAIN = RenderMode(local_contracts=False, external_contracts=False)
# Inside the contract package local contracts are referenced unqualified.
CONTRACT = RenderMode(local_contracts=False, external_contracts=True)
CONCRETE = RenderMode(local_contracts=True, external_contracts=True)


@dataclass
class RenderContext:
	known_types: AbstractSet[str]
	namespaces: NamespaceTable = DEFAULT_NAMESPACES
	# Import path of the contract package, used when `iface.X` is referenced.
	contract_import: Optional[str] = None
	contract_package: str = CONTRACT_PACKAGE
	# Package name → import path, from the scanned sources.
	source_imports: Mapping[str, str] = field(default_factory=dict)
	referenced: Set[str] = field(default_factory=set)

	def is_known(self, name: str) -> bool:
		return name in self.known_types

	def reference(self, namespace: str) -> None:
		self.referenced.add(namespace)

	def import_lines(self) -> List[str]:
		lines = []
		for key in sorted(self.referenced):
			if key == self.contract_package and self.contract_import is not None:
				spec = f'"{self.contract_import}"'
			elif key not in self.namespaces and key in self.source_imports:
				spec = _import_spec(key, self.source_imports[key])
			else:
				spec = self.namespaces.import_string(key)
			lines.append(f"import {spec}")
		return lines


def _import_spec(name: str, path: str) -> str:
	if path.rsplit("/", 1)[-1] == name:
		return f'"{path}"'
	return f'{name} "{path}"'


@dataclass(frozen=True)
class _Rendered:
	text: str
	# Denotes a contract (local or external): contracts are capability sets
	# referenced by value, so a pointer to one collapses to the contract.
	by_value: bool = False


def render_type(node: TypeNode, mode: RenderMode, ctx: RenderContext) -> str:
	return _render(node, mode, ctx).text


def _render(node: TypeNode, mode: RenderMode, ctx: RenderContext) -> _Rendered:
	if isinstance(node, Ident):
		if not ctx.is_known(node.name):
			return _Rendered(node.name)
		if mode.local_contracts:
			ctx.reference(ctx.contract_package)
			return _Rendered(f"{ctx.contract_package}.{node.name}", by_value=True)
		return _Rendered(node.name, by_value=mode.targets_contracts)
	if isinstance(node, PointerType):
		inner = _render(node.elem, mode, ctx)
		if inner.by_value:
			return inner
		return _Rendered("*" + inner.text)
	if isinstance(node, QualifiedName):
		namespace = node.namespace
		contract = mode.external_contracts and ctx.namespaces.is_known(namespace)
		if contract:
			namespace = ctx.namespaces.contract_alias(namespace)
		# Whatever namespace the text ends up naming needs an import.
		ctx.reference(namespace)
		return _Rendered(f"{namespace}.{node.name}", by_value=contract)
	if isinstance(node, MapType):
		return _Rendered(f"map[{render_type(node.key, mode, ctx)}]{render_type(node.value, mode, ctx)}")
	if isinstance(node, ArrayType):
		return _Rendered(f"[{_array_length(node)}]{render_type(node.elem, mode, ctx)}")
	if isinstance(node, Ellipsis):
		return _Rendered("..." + render_type(node.elem, mode, ctx))
	if isinstance(node, FuncType):
		return _Rendered("func" + render_func_type(node, mode, ctx))
	if isinstance(node, InterfaceType):
		return _Rendered(_render_interface(node, mode, ctx))
	raise UnsupportedTypeError(f"unsupported type expression: {type(node).__name__}", loc=getattr(node, "loc", None))


def _array_length(node: ArrayType) -> str:
	if node.length is None:
		return ""
	if node.length == VARIADIC_LEN:
		return VARIADIC_LEN
	raise UnsupportedTypeError(f"unsupported array length: [{node.length}]", loc=node.loc)


def _render_interface(node: InterfaceType, mode: RenderMode, ctx: RenderContext) -> str:
	if not node.methods:
		return "interface{}"
	members = []
	for member in node.methods:
		if member.is_embedded:
			members.append(render_type(member.type, mode, ctx))
		else:
			assert isinstance(member.type, FuncType)
			members.append(member.names[0] + render_func_type(member.type, mode, ctx))
	return "interface{ " + "; ".join(members) + " }"


def render_field_types(fields: Sequence[Field], mode: RenderMode, ctx: RenderContext) -> List[str]:
	"""One rendered type per declared name; unnamed fields count once."""
	rendered: List[str] = []
	for f in fields:
		text = render_type(f.type, mode, ctx)
		rendered.extend([text] * max(1, len(f.names)))
	return rendered


def format_results(types: Sequence[str]) -> str:
	"""
	Go result-list grammar: nothing for no results, ` T` for one,
	` (T1, T2)` for several.
	"""
	if not types:
		return ""
	if len(types) == 1:
		return " " + types[0]
	return " (" + ", ".join(types) + ")"


def render_func_type(node: FuncType, mode: RenderMode, ctx: RenderContext) -> str:
	"""`(T1, T2) R` without parameter names or a leading `func`."""
	params = ", ".join(render_field_types(node.params, mode, ctx))
	return f"({params}){format_results(render_field_types(node.results, mode, ctx))}"


__all__ = [
	"CONTRACT_PACKAGE",
	"RenderMode",
	"PLAIN",
	"CONTRACT",
	"CONCRETE",
	"RenderContext",
	"render_type",
	"render_field_types",
	"format_results",
	"render_func_type",
]
