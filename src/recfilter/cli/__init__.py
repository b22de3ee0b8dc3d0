"""recfilter CLI layer.

Expose ``cli`` and ``main`` lazily to avoid importing ``recfilter.cli.main``
at package import time. This prevents the RuntimeWarning emitted when
executing ``python -m recfilter.cli.main``.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name in {"cli", "main"}:
        from .main import cli as _cli
        from .main import main as _main

        return _cli if name == "cli" else _main
    raise AttributeError(name)
