# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Method signatures and forwarding calls for a function declaration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ifacegen.parser.ast import Ellipsis, Field, FuncDecl, TypeNode
from ifacegen.render import (
	CONCRETE,
	CONTRACT,
	RenderContext,
	format_results,
	render_field_types,
	render_func_type,
	render_type,
)


@dataclass(frozen=True)
class Param:
	name: str
	type: TypeNode

	@property
	def variadic(self) -> bool:
		return isinstance(self.type, Ellipsis)


def expand_params(fields: Sequence[Field]) -> List[Param]:
	"""
	Flatten grouped parameters (`a, b int`) into one Param per name.

	Unnamed and blank (`_`) parameters cannot be forwarded by name, so they
	get the positional name `arg<N>`, skipping any N whose name is already
	declared.
	"""
	declared = {name for f in fields for name in f.names}
	params: List[Param] = []
	for f in fields:
		for name in f.names or [""]:
			if not name or name == "_":
				n = len(params)
				while f"arg{n}" in declared:
					n += 1
				name = f"arg{n}"
				declared.add(name)
			params.append(Param(name=name, type=f.type))
	return params


def contract_signature(decl: FuncDecl, ctx: RenderContext) -> str:
	"""Interface method line: `Name(T1, T2) R`."""
	return decl.name + render_func_type(decl.type, CONTRACT, ctx)


def concrete_signature(decl: FuncDecl, ctx: RenderContext) -> str:
	"""Method declaration part: `Name(a T1, b T2) R`."""
	params = ", ".join(f"{p.name} {render_type(p.type, CONCRETE, ctx)}" for p in expand_params(decl.type.params))
	results = format_results(render_field_types(decl.type.results, CONCRETE, ctx))
	return f"{decl.name}({params}){results}"


def forwarding_call(decl: FuncDecl) -> str:
	"""`[return ]Name(a, b, rest...)`."""
	args = ", ".join(p.name + ("..." if p.variadic else "") for p in expand_params(decl.type.params))
	prefix = "return " if decl.type.results else ""
	return f"{prefix}{decl.name}({args})"


__all__ = ["Param", "expand_params", "contract_signature", "concrete_signature", "forwarding_call"]
