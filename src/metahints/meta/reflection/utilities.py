"""Walk the constructors, fields, methods and interfaces of a class."""

from __future__ import annotations

import inspect
from abc import ABCMeta
from collections.abc import Callable
from typing import Any, get_overloads

from ...defaults import Defaults
from .elements import (
    ConstructorElement,
    FieldElement,
    MethodElement,
    as_function,
    declared_field_hints,
    hierarchy_types,
)


def is_interface(cls: type) -> bool:
    """Whether a class is an interface: an abstract class, a protocol, or an abstract base class
    declared directly on ABC even when all its methods are concrete."""
    if cls in Defaults.IGNORED_TYPES:
        return False
    if inspect.isabstract(cls) or getattr(cls, "_is_protocol", False):
        return True
    return isinstance(cls, ABCMeta) and any(b in Defaults.IGNORED_TYPES for b in cls.__bases__)


def declared_constructors(cls: type) -> list[ConstructorElement]:
    """The constructors declared by a class: the typing.overload declarations of its __init__,
    then the implementation. Empty when __init__ is inherited or not a Python function."""
    init = cls.__dict__.get(Defaults.CONSTRUCTOR_NAME)
    if not inspect.isfunction(init):
        return []
    return [ConstructorElement(cls, f) for f in (*get_overloads(init), init)]


def declared_fields(cls: type) -> list[FieldElement]:
    """The annotated attributes declared by a class itself."""
    return [FieldElement(cls, name, hint) for name, hint in declared_field_hints(cls).items()]


def declared_methods(cls: type) -> list[MethodElement]:
    """The functions, static methods and class methods declared by a class itself. __init__ is
    a constructor, not a method."""
    return [
        MethodElement(cls, name, attribute)
        for name, attribute in vars(cls).items()
        if name != Defaults.CONSTRUCTOR_NAME and as_function(attribute) is not None
    ]


def do_with_fields(
    cls: type,
    callback: Callable[[FieldElement], Any],
    predicate: Callable[[FieldElement], bool] | None = None,
) -> None:
    """Invoke a callback on every field declared in the hierarchy of a class.

    Args:
        cls (type): the class to walk.
        callback (Callable[[FieldElement], Any]): invoked for each matching field.
        predicate (Callable[[FieldElement], bool] | None): filter, all fields when None.
    """
    for c in hierarchy_types(cls):
        for f in declared_fields(c):
            if predicate is None or predicate(f):
                callback(f)


def do_with_methods(
    cls: type,
    callback: Callable[[MethodElement], Any],
    predicate: Callable[[MethodElement], bool] | None = None,
) -> None:
    """Invoke a callback on every method declared in the hierarchy of a class, overridden
    methods included.

    Args:
        cls (type): the class to walk.
        callback (Callable[[MethodElement], Any]): invoked for each matching method.
        predicate (Callable[[MethodElement], bool] | None): filter, all methods when None.
    """
    for c in hierarchy_types(cls):
        for m in declared_methods(c):
            if predicate is None or predicate(m):
                callback(m)


def all_interfaces(cls: type) -> tuple[type, ...]:
    """The interfaces of a class, direct or inherited, in MRO order. An interface is its own
    interface."""
    return tuple(c for c in hierarchy_types(cls) if is_interface(c))
