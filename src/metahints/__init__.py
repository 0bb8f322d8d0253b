"""
metahints: declare at build time the reflective accesses an application needs at runtime.

This library provides:
- Declarative annotations with meta-annotations and attribute aliases
- The Reflective marker and pluggable reflective processors
- A registrar walking classes, their interfaces and their hierarchy to register runtime hints
- Runtime hints (reflection and proxies) with predicates to query them
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from .hints import RuntimeHints, RuntimeHintsPredicates
from .meta.annotations import Annotation, MergedAnnotations, SearchStrategy, alias_for
from .reflective import (
    ProcessorRegistry,
    Reflective,
    ReflectiveProcessor,
    ReflectiveRuntimeHintsRegistrar,
    SimpleReflectiveProcessor,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Annotations
    "Annotation",
    "MergedAnnotations",
    "SearchStrategy",
    "alias_for",
    # Registration
    "ProcessorRegistry",
    "Reflective",
    "ReflectiveProcessor",
    "ReflectiveRuntimeHintsRegistrar",
    "SimpleReflectiveProcessor",
    # Hints
    "RuntimeHints",
    "RuntimeHintsPredicates",
]
