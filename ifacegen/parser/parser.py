# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lark front-end for Go declarations.

The grammar (grammar.lark) understands everything that can appear in a
declaration's type position and skips over function bodies and initializers
as balanced token runs. This module owns the post-lexer that implements Go's
semicolon insertion and the tree → `ifacegen.parser.ast` builder.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from lark import Lark, Token, Tree

from .ast import (
	ArrayType,
	CHAN_BOTH,
	CHAN_RECV,
	CHAN_SEND,
	ChanType,
	Ellipsis,
	Field,
	FuncDecl,
	FuncType,
	Ident,
	ImportSpec,
	InterfaceType,
	Located,
	MapType,
	PointerType,
	QualifiedName,
	SourceFile,
	StructType,
	TypeNode,
	TypeSpec,
	VARIADIC_LEN,
)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()


class GoSyntaxError(ValueError):
	"""
	Declaration the grammar accepts but Go rejects (e.g. mixing named and
	unnamed parameters). Carries a location so the caller can report a
	diagnostic instead of a traceback.
	"""

	def __init__(self, message: str, *, loc: Optional[Located]) -> None:
		super().__init__(message)
		self.loc = loc


class SemicolonInserter:
	"""
	Go's automatic semicolon insertion as a lark post-lexer.

	A newline becomes a `_TERMINATOR` when the line's final token is an
	identifier, a literal, one of `break continue fallthrough return`, one of
	`++ --`, or a closing `) ] }`. The four keywords lex as NAME here, so the
	identifier rule covers them. There is no paren/bracket suppression: Go
	applies the rule at any nesting depth.
	"""

	always_accept = ("NEWLINE", "SEMI", "BLOCK_COMMENT")

	TERMINABLE = {
		"NAME",
		"NUMBER",
		"STRING",
		"CHAR",
		"RPAR",
		"RSQB",
		"RBRACE",
	}

	TERMINABLE_OPS = {"++", "--"}

	def __init__(self) -> None:
		self.can_terminate = False

	def process(self, stream):
		self.can_terminate = False
		last: Token | None = None
		for token in stream:
			ttype = token.type
			if ttype == "BLOCK_COMMENT":
				# A general comment spanning lines acts like a newline.
				if "\n" in token.value and self.can_terminate:
					yield Token.new_borrow_pos("_TERMINATOR", "\n", token)
					self.can_terminate = False
				continue
			if ttype == "NEWLINE":
				if self.can_terminate:
					yield Token.new_borrow_pos("_TERMINATOR", token.value, token)
					self.can_terminate = False
				continue
			if ttype == "SEMI":
				yield Token.new_borrow_pos("_TERMINATOR", token.value, token)
				self.can_terminate = False
				continue
			yield token
			last = token
			self.can_terminate = self._is_terminable(token)
		# A file may end without a trailing newline.
		if self.can_terminate and last is not None:
			yield Token.new_borrow_pos("_TERMINATOR", "", last)
			self.can_terminate = False

	def _is_terminable(self, token: Token) -> bool:
		if token.type == "OP":
			return token.value in self.TERMINABLE_OPS
		return token.type in self.TERMINABLE


_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
	postlex=SemicolonInserter(),
)


def parse_source(source: str, path: Optional[str] = None) -> SourceFile:
	"""
	Parse one Go source file.

	Raises lark's `UnexpectedInput` on malformed input and `GoSyntaxError`
	on declarations Go would reject.
	"""
	tree = _PARSER.parse(source)
	return _DeclBuilder(path).build_file(tree)


class _DeclBuilder:
	def __init__(self, path: Optional[str]) -> None:
		self.path = path

	def build_file(self, tree: Tree) -> SourceFile:
		result = SourceFile(package="", path=self.path)
		for child in _trees(tree):
			kind = _name(child)
			if kind == "package_clause":
				result.package = _tokens(child)[0].value
			elif kind == "import_decl":
				result.imports.extend(self._build_import(spec) for spec in _trees(child))
			elif kind == "type_decl":
				result.decls.extend(self._build_type_spec(spec) for spec in _trees(child))
			elif kind == "func_decl":
				result.decls.append(self._build_func_decl(child))
			# value_decl: initializers carry no declaration shape we need.
		return result

	def _build_import(self, tree: Tree) -> ImportSpec:
		kind = _name(tree)
		tokens = _tokens(tree)
		path = _unquote(tokens[-1].value)
		if kind == "import_named":
			return ImportSpec(path=path, name=tokens[0].value, loc=self._loc(tree))
		if kind == "import_dot":
			return ImportSpec(path=path, name=".", loc=self._loc(tree))
		return ImportSpec(path=path, loc=self._loc(tree))

	def _build_type_spec(self, tree: Tree) -> TypeSpec:
		name_tok = _tokens(tree)[0]
		type_node = self.build_type(_trees(tree)[0])
		return TypeSpec(
			name=name_tok.value,
			type=type_node,
			loc=self._loc_from_token(name_tok),
			alias=_name(tree) == "type_alias",
		)

	def _build_func_decl(self, tree: Tree) -> FuncDecl:
		recv: Optional[Field] = None
		sig_node: Optional[Tree] = None
		for child in _trees(tree):
			kind = _name(child)
			if kind == "receiver":
				fields = self._build_parameters(_trees(child)[0])
				if len(fields) != 1 or len(fields[0].names) > 1:
					raise GoSyntaxError("method has multiple receivers", loc=self._loc(child))
				recv = fields[0]
			elif kind == "signature":
				sig_node = child
		name_tok = _tokens(tree)[0]
		assert sig_node is not None
		return FuncDecl(
			name=name_tok.value,
			recv=recv,
			type=self._build_signature(sig_node),
			loc=self._loc_from_token(name_tok),
		)

	def _build_signature(self, tree: Tree) -> FuncType:
		children = _trees(tree)
		params = self._build_parameters(children[0])
		results: List[Field] = []
		if len(children) > 1:
			result_node = children[1]
			if _name(result_node) == "parameters":
				results = self._build_parameters(result_node)
			else:
				results = [Field(names=[], type=self.build_type(result_node), loc=self._loc(result_node))]
		return FuncType(params=params, results=results, loc=self._loc(tree))

	def _build_parameters(self, tree: Tree) -> List[Field]:
		items: List[Tuple[Optional[str], TypeNode, bool, Located]] = []
		for item in _trees(tree):
			kind = _name(item)
			type_node = self.build_type(_trees(item)[-1])
			name_toks = [t for t in _tokens(item) if t.type == "NAME"]
			name = name_toks[0].value if name_toks else None
			variadic = kind in {"named_variadic", "bare_variadic"}
			items.append((name, type_node, variadic, self._loc(item)))
		return _group_params(items)

	def build_type(self, tree: Tree) -> TypeNode:
		kind = _name(tree)
		loc = self._loc(tree)
		children = _trees(tree)
		if kind == "type_name":
			return Ident(name=_tokens(tree)[0].value, loc=loc)
		if kind == "qualified_type":
			ns_tok, name_tok = _tokens(tree)
			return QualifiedName(namespace=ns_tok.value, name=name_tok.value, loc=loc)
		if kind in {"pointer_type", "embedded_pointer"}:
			return PointerType(elem=self.build_type(children[0]), loc=loc)
		if kind == "slice_type":
			return ArrayType(elem=self.build_type(children[0]), length=None, loc=loc)
		if kind == "array_type":
			len_node, elem_node = children
			if _name(len_node) == "variadic_len":
				length = VARIADIC_LEN
			else:
				length = " ".join(t.value for t in len_node.scan_values(lambda v: isinstance(v, Token)))
			return ArrayType(elem=self.build_type(elem_node), length=length, loc=loc)
		if kind == "map_type":
			key, value = children
			return MapType(key=self.build_type(key), value=self.build_type(value), loc=loc)
		if kind == "chan_type":
			return ChanType(elem=self.build_type(children[0]), direction=CHAN_BOTH, loc=loc)
		if kind == "send_chan_type":
			return ChanType(elem=self.build_type(children[0]), direction=CHAN_SEND, loc=loc)
		if kind == "recv_chan_type":
			return ChanType(elem=self.build_type(children[0]), direction=CHAN_RECV, loc=loc)
		if kind == "func_type":
			ft = self._build_signature(children[0])
			ft.loc = loc
			return ft
		if kind == "struct_type":
			return StructType(fields=[self._build_struct_field(f) for f in children], loc=loc)
		if kind == "interface_type":
			return InterfaceType(methods=[self._build_iface_elem(e) for e in children], loc=loc)
		raise NotImplementedError(f"Unsupported type node in builder: {kind}")

	def _build_struct_field(self, tree: Tree) -> Field:
		tag: Optional[str] = None
		type_node: Optional[TypeNode] = None
		for child in _trees(tree):
			if _name(child) == "tag":
				tag = _tokens(child)[0].value
			else:
				type_node = self.build_type(child)
		assert type_node is not None
		names = [t.value for t in _tokens(tree) if t.type == "NAME"]
		return Field(names=names, type=type_node, tag=tag, loc=self._loc(tree))

	def _build_iface_elem(self, tree: Tree) -> Field:
		if _name(tree) == "iface_method":
			name_tok = _tokens(tree)[0]
			sig = self._build_signature(_trees(tree)[0])
			return Field(names=[name_tok.value], type=sig, loc=self._loc_from_token(name_tok))
		return Field(names=[], type=self.build_type(tree), loc=self._loc(tree))

	def _loc(self, tree: Tree) -> Optional[Located]:
		meta = tree.meta
		if getattr(meta, "empty", True):
			return None
		return Located(line=meta.line, column=meta.column, file=self.path)

	def _loc_from_token(self, token: Token) -> Located:
		return Located(line=token.line, column=token.column, file=self.path)


def _group_params(items: List[Tuple[Optional[str], TypeNode, bool, Located]]) -> List[Field]:
	"""
	Apply Go's parameter grouping rule.

	Either every entry is a bare type (`func(int, string)`) or every entry is
	named, in which case bare identifiers are names sharing the type of the
	next named entry (`func(a, b int)`).
	"""
	if all(name is None for name, _typ, _variadic, _loc in items):
		return [Field(names=[], type=_variadic(typ, loc) if variadic else typ, loc=loc) for _n, typ, variadic, loc in items]
	fields: List[Field] = []
	pending: List[str] = []
	for name, typ, variadic, loc in items:
		if name is None:
			if variadic or not isinstance(typ, Ident):
				raise GoSyntaxError("mixed named and unnamed parameters", loc=loc)
			pending.append(typ.name)
			continue
		fields.append(Field(names=[*pending, name], type=_variadic(typ, loc) if variadic else typ, loc=loc))
		pending = []
	if pending:
		raise GoSyntaxError("mixed named and unnamed parameters", loc=items[-1][3])
	return fields


def _variadic(elem: TypeNode, loc: Optional[Located]) -> Ellipsis:
	return Ellipsis(elem=elem, loc=loc)


def _unquote(literal: str) -> str:
	# Import paths never contain escapes in practice; strip the delimiters.
	return literal[1:-1]


def _trees(tree: Tree) -> List[Tree]:
	return [c for c in tree.children if isinstance(c, Tree)]


def _tokens(tree: Tree) -> List[Token]:
	return [c for c in tree.children if isinstance(c, Token)]


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


__all__ = ["GoSyntaxError", "SemicolonInserter", "parse_source"]
