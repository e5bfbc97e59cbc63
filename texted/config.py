from __future__ import annotations

import logging
import os
from typing import Dict, Optional

SYNTAXES = ("shell", "sexp", "json")

_DEFAULT_SYNTAX = "shell"
_DEFAULT_LOG_LEVEL = "WARNING"

# Deepest list nesting the readers and the evaluator accept
MAX_NESTING = 200

# Suffix -> syntax defaults for script files
_DEFAULT_SUFFIXES = {
    ".texted": "shell",
    ".txd": "shell",
    ".sexp": "sexp",
    ".el": "sexp",
    ".json": "json",
}

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def get_default_syntax() -> str:
    raw = (os.environ.get("TEXTED_SYNTAX") or _DEFAULT_SYNTAX).strip().lower()
    if raw not in SYNTAXES:
        raise ValueError(f"TEXTED_SYNTAX must be one of {', '.join(SYNTAXES)}, got {raw!r}")
    return raw


def get_log_level() -> str:
    return (os.environ.get("TEXTED_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).strip().upper()


def get_script_suffixes() -> Dict[str, str]:
    """Map file suffixes to script syntaxes.

    TEXTED_SCRIPT_SUFFIXES holds `suffix=syntax` pairs joined by the OS path
    separator, e.g. `.tx=shell:.lisp=sexp`. Entries extend the defaults.
    """
    suffixes = dict(_DEFAULT_SUFFIXES)
    raw = os.environ.get("TEXTED_SCRIPT_SUFFIXES")
    if not raw:
        return suffixes
    for item in raw.split(_sep()):
        item = item.strip()
        if not item:
            continue
        suffix, _, syntax = item.partition("=")
        syntax = syntax.strip().lower()
        if syntax not in SYNTAXES:
            raise ValueError(f"Unknown syntax {syntax!r} for suffix {suffix!r}")
        suffix = suffix.strip()
        if not suffix.startswith("."):
            suffix = "." + suffix
        suffixes[suffix] = syntax
    return suffixes


def syntax_for_path(path: str) -> str:
    lowered = path.lower()
    for suffix, syntax in get_script_suffixes().items():
        if lowered.endswith(suffix):
            return syntax
    return get_default_syntax()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the `texted` logger (idempotent)."""
    logger = logging.getLogger("texted")
    logger.setLevel((level or get_log_level()).upper())
    if not any(getattr(h, "_texted_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._texted_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
