"""Exception utilities for metahints."""

from .traced_exceptions import MetaHintsError, TracedException, format_exception

__all__ = [
    "MetaHintsError",
    "TracedException",
    "format_exception",
]
