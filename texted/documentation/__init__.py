"""Function documentation, built once from the static table in `catalog`.

Lookups never mutate anything; the mapping is read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from texted.documentation.catalog import ENTRIES
from texted.documentation.types import ExampleDoc, FunctionDoc, ParameterDoc

DOCUMENTATION: Mapping[str, FunctionDoc] = MappingProxyType({doc.name: doc for doc in ENTRIES})


def get_documentation(name: str) -> Optional[FunctionDoc]:
    return DOCUMENTATION.get(name)


def all_documentation() -> list[FunctionDoc]:
    """Every entry, sorted by function name."""
    return [DOCUMENTATION[name] for name in sorted(DOCUMENTATION)]


def documentation_by_category(category: str) -> list[FunctionDoc]:
    return [doc for doc in all_documentation() if doc.category == category]


def categories() -> list[str]:
    return sorted({doc.category for doc in DOCUMENTATION.values() if doc.category})


def function_count() -> int:
    return len(DOCUMENTATION)


def format_documentation(doc: FunctionDoc) -> str:
    """Render one entry as Markdown."""
    out = [f"# {doc.name}", "", f"**{doc.summary}**", ""]
    if doc.description:
        out += ["## Description", "", doc.description, ""]
    if doc.parameters:
        out += ["## Parameters", ""]
        for p in doc.parameters:
            optional = " (optional)" if p.optional else ""
            out.append(f"- **{p.name}** ({p.type}){optional}: {p.description}")
        out.append("")
    if doc.examples:
        out += ["## Examples", ""]
        for ex in doc.examples:
            out += [f"### {ex.description}", ""]
            if ex.buffer:
                out += ["**Initial buffer:**", "```", ex.buffer, "```", ""]
            out += ["**Command:**", "```", ex.input, "```", "", f"**Result:** `{ex.result}`", ""]
    out += ["## Category", "", doc.category, ""]
    if doc.see_also:
        out += ["## See Also", ""]
        out += [f"- {name}" for name in doc.see_also]
        out.append("")
    return "\n".join(out)


__all__ = [
    "DOCUMENTATION",
    "FunctionDoc",
    "ParameterDoc",
    "ExampleDoc",
    "get_documentation",
    "all_documentation",
    "documentation_by_category",
    "categories",
    "function_count",
    "format_documentation",
]
