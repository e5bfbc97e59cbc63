"""texted language server package.

This package provides:
- A pygls-based Language Server for texted scripts (shell, sexp and json syntax).
- A static indexer that parses documents without evaluating them.
"""

__all__ = [
    "server",
    "indexer",
]
