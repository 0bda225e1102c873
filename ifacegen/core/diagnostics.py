# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the parser, configuration and generator phases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a tool diagnostic (error/warning)."""

	message: str
	# Phase label: "parser", "config" or "generate".
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		# Downstream formatting relies on a structured span, never None.
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self, default_file: str | None = None) -> str:
		file = self.span.file or default_file or "<unknown>"
		return f"{file}:{self.span.format_position()}: {self.severity}: {self.message}"

	def to_dict(self, default_file: str | None = None) -> dict[str, Any]:
		return {
			"phase": self.phase,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file or default_file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}


__all__ = ["Diagnostic"]
