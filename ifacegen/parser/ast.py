# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declaration-level Go AST produced by the parser.

Only the shape of declarations is modelled: type expressions, signatures,
struct/interface bodies, imports. Function bodies and initializers are not
represented.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class Located:
	line: int
	column: int
	file: Optional[str] = None


class TypeNode:
	loc: Optional[Located]


@dataclass
class Ident(TypeNode):
	name: str
	loc: Optional[Located] = None


@dataclass
class PointerType(TypeNode):
	elem: TypeNode
	loc: Optional[Located] = None


@dataclass
class QualifiedName(TypeNode):
	"""`namespace.name`, a type exported by another package."""

	namespace: str
	name: str
	loc: Optional[Located] = None


@dataclass
class MapType(TypeNode):
	key: TypeNode
	value: TypeNode
	loc: Optional[Located] = None


# Length marker of the `[...]T` form.
VARIADIC_LEN = "..."


@dataclass
class ArrayType(TypeNode):
	"""
	Slice or array type.

	`length` is None for slices (`[]T`), VARIADIC_LEN for `[...]T`, otherwise
	the source text of the length expression.
	"""

	elem: TypeNode
	length: Optional[str] = None
	loc: Optional[Located] = None


@dataclass
class Ellipsis(TypeNode):
	"""Type of a variadic parameter (`...T`)."""

	elem: TypeNode
	loc: Optional[Located] = None


@dataclass
class Field:
	names: List[str]
	type: TypeNode
	tag: Optional[str] = None
	loc: Optional[Located] = None

	@property
	def is_embedded(self) -> bool:
		return not self.names


@dataclass
class FuncType(TypeNode):
	params: List[Field] = field(default_factory=list)
	results: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class InterfaceType(TypeNode):
	"""Inline interface. Methods carry a single name; embedded entries carry none."""

	methods: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class StructType(TypeNode):
	fields: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


CHAN_BOTH = "both"
CHAN_SEND = "send"
CHAN_RECV = "recv"


@dataclass
class ChanType(TypeNode):
	elem: TypeNode
	direction: str = CHAN_BOTH
	loc: Optional[Located] = None


@dataclass
class FuncDecl:
	name: str
	recv: Optional[Field]
	type: FuncType
	loc: Located


@dataclass
class TypeSpec:
	name: str
	type: TypeNode
	loc: Located
	alias: bool = False


@dataclass
class ImportSpec:
	path: str
	name: Optional[str] = None
	loc: Optional[Located] = None


Decl = Union[FuncDecl, TypeSpec]


@dataclass
class SourceFile:
	package: str
	imports: List[ImportSpec] = field(default_factory=list)
	decls: List[Decl] = field(default_factory=list)
	path: Optional[str] = None

	@property
	def funcs(self) -> List[FuncDecl]:
		return [d for d in self.decls if isinstance(d, FuncDecl)]

	@property
	def types(self) -> List[TypeSpec]:
		return [d for d in self.decls if isinstance(d, TypeSpec)]


def is_exported(name: str) -> bool:
	"""Go visibility rule: the first character is an upper-case letter."""
	return name[:1].isupper()


__all__ = [
	"Located",
	"TypeNode",
	"Ident",
	"PointerType",
	"QualifiedName",
	"MapType",
	"VARIADIC_LEN",
	"ArrayType",
	"Ellipsis",
	"Field",
	"FuncType",
	"InterfaceType",
	"StructType",
	"CHAN_BOTH",
	"CHAN_SEND",
	"CHAN_RECV",
	"ChanType",
	"FuncDecl",
	"TypeSpec",
	"ImportSpec",
	"Decl",
	"SourceFile",
	"is_exported",
]
