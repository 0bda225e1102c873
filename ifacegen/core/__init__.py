"""
ifacegen.core: shared diagnostics and naming helpers.

Modules:
  - span: source location carried by diagnostics
  - diagnostics: Diagnostic record + formatting
  - naming: Go identifier → file name conversion
"""

__all__ = [
    "span",
    "diagnostics",
    "naming",
]
