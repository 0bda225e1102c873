# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snake_case(name: str) -> str:
	"""`WidgetBase` → `widget_base`, `HTTPServer` → `http_server`."""
	return _WORD_BOUNDARY.sub("_", name).lower()


def go_file_name(type_name: str) -> str:
	return snake_case(type_name) + ".go"


__all__ = ["snake_case", "go_file_name"]
