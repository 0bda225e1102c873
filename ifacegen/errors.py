# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fatal generator errors.

The tool runs over source that already compiles, so a declaration shape the
generator cannot express is a hard stop: nothing is written and the CLI
reports the error with the offending location.
"""

from __future__ import annotations

from typing import Optional

from ifacegen.parser.ast import Located


class GenerationError(Exception):
	def __init__(self, message: str, *, loc: Optional[Located] = None) -> None:
		super().__init__(message)
		self.loc = loc


class UnsupportedTypeError(GenerationError):
	"""A type expression kind (or array length form) the renderer cannot emit."""


__all__ = ["GenerationError", "UnsupportedTypeError"]
