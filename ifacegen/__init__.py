# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
ifacegen: Go interface generator.

Pipeline:
  parser: Go declarations → ifacegen.parser.ast
  symbols: declarations → SymbolTable of discovered types
  render/signatures: type expressions and signatures → Go text
  synth: contracts, forwarding implementation, conformance testers
  driver/cli: orchestration and file output
"""

__all__ = ["parser", "symbols", "render", "signatures", "synth", "driver", "cli"]
