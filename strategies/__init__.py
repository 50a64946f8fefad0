"""Auto-discovery of Strategy subclasses.

Every ``*.py`` module in this ``strategies/`` package is imported and
scanned for concrete :class:`strategy.Strategy` subclasses.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from strategy import Strategy

_PKG_DIR = Path(__file__).resolve().parent


def _subclasses_in_module(mod) -> list[type[Strategy]]:
    found: list[type[Strategy]] = []
    for attr_name in dir(mod):
        obj = getattr(mod, attr_name)
        if (
            isinstance(obj, type)
            and issubclass(obj, Strategy)
            and obj is not Strategy
            and obj.__module__ == mod.__name__
        ):
            found.append(obj)
    return found


def discover_strategies() -> list[type[Strategy]]:
    """Return all built-in Strategy subclasses, sorted by module name."""
    found: list[type[Strategy]] = []
    for info in sorted(pkgutil.iter_modules([str(_PKG_DIR)]), key=lambda i: i.name):
        mod = importlib.import_module(f"strategies.{info.name}")
        found.extend(_subclasses_in_module(mod))
    return found


def find_strategy(name: str) -> type[Strategy]:
    """Look up a strategy class by its ``name`` (case-insensitive).

    Raises
    ------
    KeyError
        If no discovered strategy carries that name.
    """
    classes = discover_strategies()
    for cls in classes:
        if cls().name.lower() == name.lower():
            return cls
    available = [cls().name for cls in classes]
    raise KeyError(f"Strategy {name!r} not found. Available: {available}")
