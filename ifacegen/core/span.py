# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source positions attached to diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""File plus 1-based line/column; any part may be unknown."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None

	@classmethod
	def from_loc(cls, loc: Any, default_file: Optional[str] = None) -> "Span":
		"""
		Span of anything exposing `line`/`column`: an AST `Located` or a lark
		`UnexpectedInput`. Locations without a file take `default_file`.
		"""
		if loc is None:
			return cls(file=default_file)
		return cls(
			file=getattr(loc, "file", None) or default_file,
			line=_position(getattr(loc, "line", None)),
			column=_position(getattr(loc, "column", None)),
		)

	def format_position(self) -> str:
		line = "?" if self.line is None else self.line
		column = "?" if self.column is None else self.column
		return f"{line}:{column}"


def _position(value: Any) -> Optional[int]:
	# lark reports "?" for errors at end of input.
	return value if isinstance(value, int) and value > 0 else None


__all__ = ["Span"]
