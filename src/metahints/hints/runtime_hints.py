"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-18
Description: Runtime hints: declarative records of the reflective accesses and of the proxies
            an ahead-of-time packaged application needs. Registering the same fact twice is
            harmless, hints are merged.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from ..meta.reflection.elements import ConstructorElement, FieldElement, MethodElement


class ExecutableMode(Enum):
    """Access needed on a constructor or a method. INVOKE includes INTROSPECT."""

    INTROSPECT = auto()
    INVOKE = auto()

    def includes(self, other: ExecutableMode) -> bool:
        return self is ExecutableMode.INVOKE or other is self


class MemberCategory(Enum):
    """Groups of members a type hint grants access to."""

    PUBLIC_FIELDS = auto()
    DECLARED_FIELDS = auto()
    INTROSPECT_PUBLIC_CONSTRUCTORS = auto()
    INTROSPECT_DECLARED_CONSTRUCTORS = auto()
    INVOKE_PUBLIC_CONSTRUCTORS = auto()
    INVOKE_DECLARED_CONSTRUCTORS = auto()
    INTROSPECT_PUBLIC_METHODS = auto()
    INTROSPECT_DECLARED_METHODS = auto()
    INVOKE_PUBLIC_METHODS = auto()
    INVOKE_DECLARED_METHODS = auto()


@dataclass(frozen=True)
class FieldHint:
    name: str


@dataclass(frozen=True)
class ExecutableHint:
    """Access to a constructor or a method, identified by name and parameter types."""

    name: str
    parameter_types: tuple[Any, ...]
    mode: ExecutableMode = ExecutableMode.INTROSPECT


class TypeHint:
    """Reflective accesses needed on one type."""

    def __init__(self, type_: type) -> None:
        self.type = type_
        self.member_categories: set[MemberCategory] = set()
        self._fields: dict[str, FieldHint] = {}
        self._constructors: dict[tuple[Any, ...], ExecutableHint] = {}
        self._methods: dict[tuple[str, tuple[Any, ...]], ExecutableHint] = {}

    def with_member_categories(self, *categories: MemberCategory) -> TypeHint:
        self.member_categories.update(categories)
        return self

    def with_field(self, name: str) -> TypeHint:
        self._fields.setdefault(name, FieldHint(name))
        return self

    def with_constructor(
        self, parameter_types: tuple[Any, ...], mode: ExecutableMode
    ) -> TypeHint:
        self._constructors[parameter_types] = _merge(
            self._constructors.get(parameter_types), "__init__", parameter_types, mode
        )
        return self

    def with_method(
        self, name: str, parameter_types: tuple[Any, ...], mode: ExecutableMode
    ) -> TypeHint:
        key = (name, parameter_types)
        self._methods[key] = _merge(self._methods.get(key), name, parameter_types, mode)
        return self

    def fields(self) -> tuple[FieldHint, ...]:
        return tuple(self._fields.values())

    def constructors(self) -> tuple[ExecutableHint, ...]:
        return tuple(self._constructors.values())

    def methods(self) -> tuple[ExecutableHint, ...]:
        return tuple(self._methods.values())

    def __repr__(self) -> str:
        return (
            f"TypeHint({self.type.__qualname__}, categories={sorted(c.name for c in self.member_categories)},"
            f" constructors={len(self._constructors)}, fields={len(self._fields)},"
            f" methods={len(self._methods)})"
        )


def _merge(
    existing: ExecutableHint | None,
    name: str,
    parameter_types: tuple[Any, ...],
    mode: ExecutableMode,
) -> ExecutableHint:
    # never downgrade an invocation to an introspection.
    if existing is not None and existing.mode.includes(mode):
        return existing
    return ExecutableHint(name, parameter_types, mode)


class ReflectionHints:
    """Reflection hints, organized by type."""

    def __init__(self) -> None:
        self._types: dict[type, TypeHint] = {}

    def register_type(self, type_: type, *categories: MemberCategory) -> TypeHint:
        """Register a type, optionally granting member categories.

        Returns:
            TypeHint: the hint of the type, created on first registration.
        """
        hint = self._types.get(type_)
        if hint is None:
            hint = self._types[type_] = TypeHint(type_)
        return hint.with_member_categories(*categories)

    def register_constructor(
        self, constructor: ConstructorElement, mode: ExecutableMode = ExecutableMode.INVOKE
    ) -> TypeHint:
        return self.register_type(constructor.declaring_type).with_constructor(
            constructor.parameter_types, mode
        )

    def register_field(self, field: FieldElement) -> TypeHint:
        return self.register_type(field.declaring_type).with_field(field.name)

    def register_method(
        self, method: MethodElement, mode: ExecutableMode = ExecutableMode.INVOKE
    ) -> TypeHint:
        return self.register_type(method.declaring_type).with_method(
            method.name, method.parameter_types, mode
        )

    def get_type_hint(self, type_: type) -> TypeHint | None:
        return self._types.get(type_)

    def type_hints(self) -> tuple[TypeHint, ...]:
        return tuple(self._types.values())


@dataclass(frozen=True)
class ProxyHint:
    """A proxy implementing an ordered list of interfaces."""

    interfaces: tuple[type, ...]


class ProxyHints:
    def __init__(self) -> None:
        self._proxies: dict[tuple[type, ...], ProxyHint] = {}

    def register_proxy(self, *interfaces: type) -> ProxyHint:
        """Register a proxy implementing the given interfaces, in order."""
        if not interfaces:
            raise ValueError("A proxy needs at least one interface.")
        return self._proxies.setdefault(interfaces, ProxyHint(interfaces))

    def proxies(self) -> tuple[ProxyHint, ...]:
        return tuple(self._proxies.values())


class RuntimeHints:
    """Entry point of the hints needed by an ahead-of-time packaged application."""

    def __init__(self) -> None:
        self._reflection = ReflectionHints()
        self._proxies = ProxyHints()

    @property
    def reflection(self) -> ReflectionHints:
        return self._reflection

    @property
    def proxies(self) -> ProxyHints:
        return self._proxies
