# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Namespace rewrite table.

Maps known external package names to their concrete import path and to the
import path of their contract-only counterpart (`gtk` → `gtk_iface`). Any
namespace outside the table is imported under its own name and never
substituted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator

CONTRACT_SUFFIX = "_iface"


class NamespaceConfigError(ValueError):
	pass


@dataclass(frozen=True)
class NamespaceEntry:
	name: str
	import_path: str
	contract_import_path: str

	@property
	def contract_alias(self) -> str:
		return f"{self.name}{CONTRACT_SUFFIX}"

	def import_string(self) -> str:
		return f'"{self.import_path}"'

	def contract_import_string(self) -> str:
		return f'{self.contract_alias} "{self.contract_import_path}"'


class NamespaceTable:
	def __init__(self, entries: Iterable[NamespaceEntry] = ()) -> None:
		self._by_name: Dict[str, NamespaceEntry] = {}
		self._by_alias: Dict[str, NamespaceEntry] = {}
		for entry in entries:
			self._by_name[entry.name] = entry
			self._by_alias[entry.contract_alias] = entry

	def __iter__(self) -> Iterator[NamespaceEntry]:
		return iter(self._by_name.values())

	def __len__(self) -> int:
		return len(self._by_name)

	def __contains__(self, key: str) -> bool:
		"""Whether `key` is a table namespace or one of their contract aliases."""
		return key in self._by_name or key in self._by_alias

	def is_known(self, namespace: str) -> bool:
		return namespace in self._by_name

	def contract_alias(self, namespace: str) -> str:
		return self._by_name[namespace].contract_alias

	def import_string(self, key: str) -> str:
		"""
		Import spec for a referenced namespace key (a package name or a
		contract alias). Unknown keys fall back to the quoted name itself.
		"""
		if key in self._by_name:
			return self._by_name[key].import_string()
		if key in self._by_alias:
			return self._by_alias[key].contract_import_string()
		return f'"{key}"'

	@classmethod
	def from_dict(cls, data: Any) -> "NamespaceTable":
		"""
		Build a table from the JSON config shape:

			{"namespaces": {"gtk": {"import": "...", "contract_import": "..."}}}
		"""
		if not isinstance(data, dict) or not isinstance(data.get("namespaces"), dict):
			raise NamespaceConfigError("namespace config must be an object with a 'namespaces' object")
		entries = []
		for name, spec in sorted(data["namespaces"].items()):
			if not isinstance(spec, dict):
				raise NamespaceConfigError(f"namespace '{name}': expected an object")
			import_path = spec.get("import")
			contract_path = spec.get("contract_import")
			if not isinstance(import_path, str) or not isinstance(contract_path, str):
				raise NamespaceConfigError(f"namespace '{name}': 'import' and 'contract_import' must be strings")
			entries.append(NamespaceEntry(name=name, import_path=import_path, contract_import_path=contract_path))
		return cls(entries)

	@classmethod
	def load(cls, path: Path) -> "NamespaceTable":
		try:
			data = json.loads(path.read_text(encoding="utf-8"))
		except json.JSONDecodeError as err:
			raise NamespaceConfigError(f"invalid JSON: {err}") from err
		except OSError as err:
			raise NamespaceConfigError(str(err)) from err
		return cls.from_dict(data)


_GOTK3 = "github.com/gotk3/gotk3"

DEFAULT_NAMESPACES = NamespaceTable(
	NamespaceEntry(name=ns, import_path=f"{_GOTK3}/{ns}", contract_import_path=f"{_GOTK3}/{ns}/iface")
	for ns in ("cairo", "gdk", "gtk", "glib", "pango")
)


__all__ = [
	"CONTRACT_SUFFIX",
	"NamespaceConfigError",
	"NamespaceEntry",
	"NamespaceTable",
	"DEFAULT_NAMESPACES",
]
