"""pajeknet.io: Pajek reader/writer with lazy symbol loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    # Pajek text
    "parse": ("pajeknet.io.pajek_io", "parse"),
    "serialize": ("pajeknet.io.pajek_io", "serialize"),
    "from_pajek": ("pajeknet.io.pajek_io", "from_pajek"),
    "to_pajek": ("pajeknet.io.pajek_io", "to_pajek"),
    # Errors
    "PajekFormatError": ("pajeknet.io.errors", "PajekFormatError"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
