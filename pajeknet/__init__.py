# pajeknet/__init__.py
"""pajeknet: Pajek network files in, Pajek network files out."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "pajeknet.adapters",
    "io": "pajeknet.io",
    "core": "pajeknet.core",
    "pajek": "pajeknet.io.pajek_io",
    "networkx": "pajeknet.adapters.networkx_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Network": ("pajeknet.core.graph", "Network"),
    "Directedness": ("pajeknet.core.graph", "Directedness"),
    # Pajek I/O
    "parse": ("pajeknet.io.pajek_io", "parse"),
    "serialize": ("pajeknet.io.pajek_io", "serialize"),
    "from_pajek": ("pajeknet.io.pajek_io", "from_pajek"),
    "to_pajek": ("pajeknet.io.pajek_io", "to_pajek"),
    "PajekFormatError": ("pajeknet.io.errors", "PajekFormatError"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("pajeknet.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("pajeknet.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("pajeknet")
except PackageNotFoundError:
    __version__ = "0.0.0"
