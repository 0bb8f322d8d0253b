"""Runtime hints, their predicates and the annotation hints support."""

from .runtime_hints import (
    ExecutableHint,
    ExecutableMode,
    FieldHint,
    MemberCategory,
    ProxyHint,
    ProxyHints,
    ReflectionHints,
    RuntimeHints,
    TypeHint,
)
from .predicates import (
    ExecutableHintPredicate,
    ProxyHintsPredicates,
    ReflectionHintsPredicates,
    RuntimeHintsPredicates,
    TypeHintPredicate,
)
from .support import register_annotation_if_necessary, register_synthesized_annotation

__all__ = [
    # Hints
    "ExecutableHint",
    "ExecutableMode",
    "FieldHint",
    "MemberCategory",
    "ProxyHint",
    "ProxyHints",
    "ReflectionHints",
    "RuntimeHints",
    "TypeHint",
    # Predicates
    "ExecutableHintPredicate",
    "ProxyHintsPredicates",
    "ReflectionHintsPredicates",
    "RuntimeHintsPredicates",
    "TypeHintPredicate",
    # Support
    "register_annotation_if_necessary",
    "register_synthesized_annotation",
]
