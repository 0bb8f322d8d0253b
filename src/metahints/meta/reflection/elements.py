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
Description: Reflective elements of a class: the class itself, its constructors, its fields
            and its methods. Elements are identified by their declaration site: two methods
            with the same name on different classes are different elements.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, get_type_hints

from loguru import logger

from ... import logs as ls
from ...defaults import Defaults
from ..annotations.model import Annotation, annotations_from_hint, declared_annotations


def hierarchy_types(cls: type) -> Iterator[type]:
    """The classes of the MRO of a class, ignored types excepted."""
    return (c for c in cls.__mro__ if c not in Defaults.IGNORED_TYPES)


def as_function(attribute: Any) -> Callable[..., Any] | None:
    """The function behind a class attribute when it is a function, a static method or a class
    method. None otherwise (builtins, properties, data)."""
    if isinstance(attribute, (staticmethod, classmethod)):
        attribute = attribute.__func__
    return attribute if inspect.isfunction(attribute) else None


def declared_field_hints(cls: type) -> dict[str, Any]:
    """The annotations declared by a class itself, evaluated when possible.

    Annotations that cannot be evaluated (unresolvable forward references) are returned raw,
    string annotations carry no typing.Annotated metadata and therefore no marker.
    """
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except (NameError, SyntaxError, TypeError, AttributeError) as e:
        logger.debug(ls.UNREADABLE_ANNOTATIONS.format(type=cls.__qualname__, error=e))
    try:
        return dict(inspect.get_annotations(cls))
    except NameError:
        return {}


def parameter_types(function: Callable[..., Any], skip_first: bool) -> tuple[Any, ...]:
    """The resolved parameter types of a function. Missing or unresolvable hints are Any.

    Args:
        function (Callable[..., Any]): the function.
        skip_first (bool): whether to skip the bound parameter (self or cls).

    Returns:
        tuple[Any, ...]: the parameter types in declaration order.
    """
    try:
        hints = get_type_hints(function)
    except (NameError, SyntaxError, TypeError, AttributeError) as e:
        logger.debug(ls.UNREADABLE_SIGNATURE.format(function=function.__qualname__, error=e))
        hints = {}
    parameters = list(inspect.signature(function).parameters.values())
    if skip_first:
        parameters = parameters[1:]
    return tuple(hints.get(p.name, Any) for p in parameters)


@dataclass(frozen=True)
class TypeElement:
    type: type

    @property
    def declaring_type(self) -> type:
        return self.type

    @property
    def name(self) -> str:
        return self.type.__qualname__

    def declared_annotations(self) -> tuple[Annotation, ...]:
        return declared_annotations(self.type)

    def hierarchy(self) -> Iterator[TypeElement]:
        yield self
        for c in hierarchy_types(self.type):
            if c is not self.type:
                yield TypeElement(c)

    def __str__(self) -> str:
        return f"type {self.name}"


@dataclass(frozen=True)
class ConstructorElement:
    """A declared __init__ or one of its typing.overload declarations."""

    declaring_type: type
    function: Callable[..., Any]

    @property
    def name(self) -> str:
        return Defaults.CONSTRUCTOR_NAME

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return parameter_types(self.function, skip_first=True)

    def declared_annotations(self) -> tuple[Annotation, ...]:
        return declared_annotations(self.function)

    def hierarchy(self) -> Iterator[ConstructorElement]:
        # constructors are never inherited.
        yield self

    def __str__(self) -> str:
        params = ", ".join(getattr(t, "__name__", repr(t)) for t in self.parameter_types)
        return f"constructor {self.declaring_type.__qualname__}({params})"


@dataclass(frozen=True)
class FieldElement:
    """An annotated class attribute."""

    declaring_type: type
    name: str
    hint: Any = field(default=None, compare=False)

    def declared_annotations(self) -> tuple[Annotation, ...]:
        return annotations_from_hint(self.hint)

    def hierarchy(self) -> Iterator[FieldElement]:
        yield self
        for c in hierarchy_types(self.declaring_type):
            if c is self.declaring_type:
                continue
            hints = declared_field_hints(c)
            if self.name in hints:
                yield FieldElement(c, self.name, hints[self.name])

    def __str__(self) -> str:
        return f"field {self.declaring_type.__qualname__}.{self.name}"


@dataclass(frozen=True)
class MethodElement:
    """A function, static method or class method declared on a class."""

    declaring_type: type
    name: str
    descriptor: Any = field(default=None, compare=False)

    @property
    def function(self) -> Callable[..., Any]:
        function = as_function(self.descriptor)
        if function is None:
            raise TypeError(f"{self.descriptor!r} is not a method of {self.declaring_type!r}")
        return function

    @property
    def is_static(self) -> bool:
        return isinstance(self.descriptor, staticmethod)

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return parameter_types(self.function, skip_first=not self.is_static)

    def declared_annotations(self) -> tuple[Annotation, ...]:
        return declared_annotations(self.function)

    def hierarchy(self) -> Iterator[MethodElement]:
        yield self
        for c in hierarchy_types(self.declaring_type):
            if c is self.declaring_type:
                continue
            attribute = c.__dict__.get(self.name)
            if as_function(attribute) is not None:
                yield MethodElement(c, self.name, attribute)

    def __str__(self) -> str:
        return f"method {self.declaring_type.__qualname__}.{self.name}"


type Element = TypeElement | ConstructorElement | FieldElement | MethodElement
