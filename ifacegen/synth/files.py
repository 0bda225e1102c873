# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Sequence

from ifacegen.render import CONTRACT_PACKAGE


@dataclass(frozen=True)
class GeneratedFile:
	# Relative to the output directory.
	path: PurePosixPath
	text: str


def go_source(package: str, imports: Sequence[str], body: str) -> str:
	"""`package` clause, one `import` line per entry, then the body."""
	head = [f"package {package}", ""]
	if imports:
		head.extend(imports)
		head.append("")
	return "\n".join(head) + "\n" + body


def contract_import_path(package_root: str, package_name: str) -> str:
	return f"{package_root}/{package_name}/{CONTRACT_PACKAGE}"


__all__ = ["GeneratedFile", "go_source", "contract_import_path"]
