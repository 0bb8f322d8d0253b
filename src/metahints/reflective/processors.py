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
Description: Reflective processors translate "this element needs reflective access" into
            reflection hints. Custom processors derive from ReflectiveProcessor and are
            referenced by the marker of the elements they process.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from ..hints.runtime_hints import ExecutableMode, ReflectionHints
from ..meta.reflection.elements import (
    ConstructorElement,
    Element,
    FieldElement,
    MethodElement,
    TypeElement,
)


class ReflectiveProcessor(ABC):
    """Register the reflection hints of an element. Processors are instantiated once per
    registrar through their zero-argument constructor and shared by every element referencing
    them."""

    @abstractmethod
    def register_reflection_hints(self, hints: ReflectionHints, element: Element) -> None:
        """Register the reflection hints of an element.

        Args:
            hints (ReflectionHints): the reflection hints to contribute to.
            element (Element): the marked element.
        """


type ProcessorReference = Callable[[], ReflectiveProcessor] | str


class SimpleReflectiveProcessor(ReflectiveProcessor):
    """Register the element itself: a type hint for types, an invocation hint for constructors
    and methods, a field hint for fields. Each case can be overridden."""

    def register_reflection_hints(self, hints: ReflectionHints, element: Element) -> None:
        match element:
            case TypeElement():
                self.register_type_hint(hints, element.type)
            case ConstructorElement():
                self.register_constructor_hint(hints, element)
            case FieldElement():
                self.register_field_hint(hints, element)
            case MethodElement():
                self.register_method_hint(hints, element)

    def register_type_hint(self, hints: ReflectionHints, type_: type) -> None:
        hints.register_type(type_)

    def register_constructor_hint(
        self, hints: ReflectionHints, constructor: ConstructorElement
    ) -> None:
        hints.register_constructor(constructor, ExecutableMode.INVOKE)

    def register_field_hint(self, hints: ReflectionHints, field: FieldElement) -> None:
        hints.register_field(field)

    def register_method_hint(self, hints: ReflectionHints, method: MethodElement) -> None:
        hints.register_method(method, ExecutableMode.INVOKE)


class DelegatingReflectiveProcessor(ReflectiveProcessor):
    """Apply several processors, in order. A failing delegate aborts the registration.

    Two delegating processors are equal when they delegate to the same processors in the same
    order.
    """

    def __init__(self, processors: Iterable[ReflectiveProcessor]) -> None:
        self.processors = tuple(processors)
        if not self.processors:
            raise ValueError("A delegating processor needs at least one processor.")

    def register_reflection_hints(self, hints: ReflectionHints, element: Element) -> None:
        for processor in self.processors:
            processor.register_reflection_hints(hints, element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegatingReflectiveProcessor):
            return NotImplemented
        return self.processors == other.processors

    def __hash__(self) -> int:
        return hash(self.processors)

    def __repr__(self) -> str:
        return f"DelegatingReflectiveProcessor({', '.join(map(repr, self.processors))})"
