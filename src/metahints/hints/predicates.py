"""Predicates answering whether runtime hints cover a reflective access.

Examples:
    >>> hints = RuntimeHints()
    >>> RuntimeHintsPredicates.reflection().on_method(Service, "lookup").invoke()(hints)
    False
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from ..defaults import Defaults
from .runtime_hints import ExecutableHint, ExecutableMode, MemberCategory, RuntimeHints, TypeHint

type RuntimeHintsPredicate = Callable[[RuntimeHints], bool]


class TypeHintPredicate:
    def __init__(self, type_: type) -> None:
        self._type = type_
        self._categories: frozenset[MemberCategory] = frozenset()

    def with_member_categories(self, *categories: MemberCategory) -> Self:
        self._categories = self._categories | frozenset(categories)
        return self

    def _type_hint(self, hints: RuntimeHints) -> TypeHint | None:
        return hints.reflection.get_type_hint(self._type)

    def __call__(self, hints: RuntimeHints) -> bool:
        hint = self._type_hint(hints)
        return hint is not None and self._categories <= hint.member_categories


class ExecutableHintPredicate(TypeHintPredicate):
    """Matches a constructor or a method. Parameter types are only checked when given."""

    def __init__(
        self, type_: type, name: str, parameter_types: tuple[Any, ...] | None = None
    ) -> None:
        super().__init__(type_)
        self._name = name
        self._parameter_types = parameter_types
        self._mode = ExecutableMode.INTROSPECT

    def introspect(self) -> Self:
        self._mode = ExecutableMode.INTROSPECT
        return self

    def invoke(self) -> Self:
        self._mode = ExecutableMode.INVOKE
        return self

    def _matches(self, hint: ExecutableHint) -> bool:
        return (
            hint.name == self._name
            and (self._parameter_types is None or hint.parameter_types == self._parameter_types)
            and hint.mode.includes(self._mode)
        )

    def __call__(self, hints: RuntimeHints) -> bool:
        hint = self._type_hint(hints)
        if hint is None:
            return False
        executables = (
            hint.constructors() if self._name == Defaults.CONSTRUCTOR_NAME else hint.methods()
        )
        return any(self._matches(e) for e in executables)


class ReflectionHintsPredicates:
    def on_type(self, type_: type) -> TypeHintPredicate:
        return TypeHintPredicate(type_)

    def on_constructor(self, type_: type, *parameter_types: Any) -> ExecutableHintPredicate:
        return ExecutableHintPredicate(type_, Defaults.CONSTRUCTOR_NAME, parameter_types)

    def on_method(
        self, type_: type, name: str, parameter_types: tuple[Any, ...] | None = None
    ) -> ExecutableHintPredicate:
        return ExecutableHintPredicate(type_, name, parameter_types)

    def on_field(self, type_: type, name: str) -> RuntimeHintsPredicate:
        def predicate(hints: RuntimeHints) -> bool:
            hint = hints.reflection.get_type_hint(type_)
            return hint is not None and any(f.name == name for f in hint.fields())

        return predicate


class ProxyHintsPredicates:
    def for_interfaces(self, *interfaces: type) -> RuntimeHintsPredicate:
        """Matches a proxy implementing exactly these interfaces, in this order."""

        def predicate(hints: RuntimeHints) -> bool:
            return any(p.interfaces == interfaces for p in hints.proxies.proxies())

        return predicate


class RuntimeHintsPredicates:
    """Static factory of the runtime hints predicates."""

    @staticmethod
    def reflection() -> ReflectionHintsPredicates:
        return ReflectionHintsPredicates()

    @staticmethod
    def proxies() -> ProxyHintsPredicates:
        return ProxyHintsPredicates()
