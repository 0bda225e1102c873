"""
Synthesizers turning a SymbolTable into generated Go files.

  - contract: interface + Assert function per discovered type
  - forwarding: Real<IName> wrapper over the package's free functions
  - testers: init() calling every Assert function
"""

from .contract import contract_file, render_contract
from .files import GeneratedFile
from .forwarding import forwarding_file, render_forwarding
from .testers import conformance_file, render_testers

__all__ = [
    "GeneratedFile",
    "contract_file",
    "render_contract",
    "forwarding_file",
    "render_forwarding",
    "render_testers",
    "conformance_file",
]
