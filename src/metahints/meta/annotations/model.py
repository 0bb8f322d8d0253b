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
Description: Declarative annotations. An annotation type is a class deriving from Annotation
            whose annotated class attributes are its attributes. Instances are immutable and
            are applied either as decorators (classes, functions, static and class methods) or
            as typing.Annotated metadata (fields). Annotation types can themselves be
            annotated, which makes the annotations they carry meta-present on every element
            they are applied to.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, ClassVar, Final, NoReturn, get_args, get_origin

from ...defaults import Defaults
from .errors import (
    AnnotationConfigurationError,
    AnnotationModificationError,
    AnnotationTargetError,
)


class _Missing:
    """Sentinel type for attributes without default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

VALUE = "value"


@dataclass(frozen=True)
class AliasFor:
    """Alias declaration of an annotation attribute.

    Without annotation, the attribute mirrors another attribute of the same annotation type.
    With an annotation, the attribute overrides the named attribute of that meta-annotation.
    """

    attribute: str
    annotation: type[Annotation] | None = None
    default: Any = MISSING

    @property
    def is_mirror(self) -> bool:
        return self.annotation is None


def alias_for(
    attribute: str, *, annotation: type[Annotation] | None = None, default: Any = MISSING
) -> Any:
    """Declare an annotation attribute as an alias.

    Examples:
        >>> class Route(Annotation):
        ...     value: str = alias_for("path", default="")
        ...     path: str = alias_for("value", default="")

        >>> @Route()
        ... class Get(Annotation):
        ...     url: str = alias_for("path", annotation=Route, default="")

    Args:
        attribute (str): the aliased attribute.
        annotation (type[Annotation] | None): the meta-annotation declaring the aliased attribute.
            None for an attribute of the same annotation.
        default (Any): the default value of the declaring attribute.

    Returns:
        Any: the alias declaration, replaced by its default when the class is created.
    """
    return AliasFor(attribute, annotation, default)


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return get_origin(annotation) is ClassVar or annotation is ClassVar


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disallowed function is added. Annotation instances are built and frozen
    by the base class only.

    Raises:
        AnnotationConfigurationError: Raised when a disallowed function is added.
    """
    for forbidden in ("__new__", "__init__", "__setattr__", "__delattr__"):
        if forbidden in namespace:
            raise AnnotationConfigurationError(
                f"Annotation type '{name}' is disallowed to define {forbidden}."
            )


def _mirror_groups(aliases: dict[str, AliasFor]) -> dict[str, frozenset[str]]:
    """Group the attributes that mirror each other. Each grouped attribute maps to its full
    group, itself included."""
    groups: list[set[str]] = []
    for name, alias in aliases.items():
        if not alias.is_mirror:
            continue
        pair = {name, alias.attribute}
        touching = [g for g in groups if g & pair]
        for g in touching:
            groups.remove(g)
            pair |= g
        groups.append(pair)
    return {name: frozenset(g) for g in groups for name in g}


def _verify_aliases(
    name: str, attributes: dict[str, Any], aliases: dict[str, AliasFor]
) -> None:
    """Verify that aliases target existing attributes and that mirrors share their default.

    Raises:
        AnnotationConfigurationError: Raised on a broken alias declaration.
    """
    for attribute, alias in aliases.items():
        if alias.is_mirror:
            if alias.attribute == attribute:
                raise AnnotationConfigurationError(
                    f"Attribute '{attribute}' of annotation '{name}' cannot be an alias for itself."
                )
            if alias.attribute not in attributes:
                raise AnnotationConfigurationError(
                    f"Attribute '{attribute}' of annotation '{name}' is an alias for"
                    f" '{alias.attribute}' which is not declared."
                )
            if attributes[attribute] != attributes[alias.attribute]:
                raise AnnotationConfigurationError(
                    f"Mirrored attributes '{attribute}' and '{alias.attribute}' of annotation"
                    f" '{name}' must declare the same default."
                )
            continue
        target = alias.annotation
        if not isinstance(target, AnnotationMeta):
            raise AnnotationConfigurationError(
                f"Attribute '{attribute}' of annotation '{name}' is an alias for {target!r}"
                " which is not an annotation type."
            )
        if alias.attribute not in target.__attributes__:
            raise AnnotationConfigurationError(
                f"Attribute '{attribute}' of annotation '{name}' is an alias for"
                f" '{alias.attribute}' which is not declared by '{target.__name__}'."
            )


class AnnotationMeta(type):
    """Metaclass collecting the attributes and the aliases of annotation types."""

    __attributes__: dict[str, Any]
    __aliases__: dict[str, AliasFor]
    __mirrors__: dict[str, frozenset[str]]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        **kwargs: Any,
    ) -> Any:
        is_root = not any(isinstance(base, AnnotationMeta) for base in bases)
        if not is_root:
            _verify_functions(name, namespace)

        attributes: dict[str, Any] = {}
        aliases: dict[str, AliasFor] = {}
        for base in reversed(bases):
            if isinstance(base, AnnotationMeta):
                attributes.update(base.__attributes__)
                aliases.update(base.__aliases__)

        own_aliases = {k: v for k, v in namespace.items() if isinstance(v, AliasFor)}
        for key, alias in own_aliases.items():
            if alias.default is MISSING:
                del namespace[key]
            else:
                namespace[key] = alias.default

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        try:
            own = inspect.get_annotations(cls)
        except NameError as e:
            raise AnnotationConfigurationError(
                f"Could not resolve the attributes of annotation '{name}': {e}"
            ) from e

        for key, annotation in own.items():
            if key.startswith("_") or _is_class_var(annotation):
                continue
            attributes[key] = namespace.get(key, MISSING)
        for key, alias in own_aliases.items():
            if key not in attributes:
                raise AnnotationConfigurationError(
                    f"Alias '{key}' of annotation '{name}' needs a type annotation."
                )
            aliases[key] = alias

        # mirrors are declared on one side only, the other side is implied.
        for key, alias in list(aliases.items()):
            if alias.is_mirror and alias.attribute not in aliases and alias.attribute in attributes:
                aliases[alias.attribute] = AliasFor(key)
                if attributes[alias.attribute] is MISSING:
                    attributes[alias.attribute] = attributes[key]
                if attributes[key] is MISSING:
                    attributes[key] = attributes[alias.attribute]

        if not is_root:
            _verify_aliases(name, attributes, aliases)

        cls.__attributes__ = attributes
        cls.__aliases__ = aliases
        cls.__mirrors__ = _mirror_groups(aliases)
        return cls


def _normalize(default: Any, value: Any) -> Any:
    """Tuple attributes accept lists and single values."""
    if isinstance(default, tuple):
        if isinstance(value, list):
            return tuple(value)
        if not isinstance(value, tuple):
            return (value,)
    return value


class Annotation(metaclass=AnnotationMeta):
    """Base class of annotation types.

    Examples:
        >>> class Cached(Annotation):
        ...     value: int = 60
        ...     region: str = "default"

        >>> class Service:
        ...     @Cached(120)
        ...     def lookup(self, key: str) -> str: ...
        ...
        ...     timeout: Annotated[float, Cached(region="slow")] = 1.0
    """

    __attributes__: ClassVar[dict[str, Any]]
    __aliases__: ClassVar[dict[str, AliasFor]]
    __mirrors__: ClassVar[dict[str, frozenset[str]]]
    __explicit__: frozenset[str]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        cls = type(self)
        if len(args) > 1:
            raise TypeError(
                f"{cls.__name__}() takes at most 1 positional argument ({len(args)} given)"
            )
        if args:
            if VALUE not in cls.__attributes__:
                raise TypeError(f"{cls.__name__}() declares no '{VALUE}' attribute")
            if VALUE in kwargs:
                raise TypeError(f"{cls.__name__}() got multiple values for attribute '{VALUE}'")
            kwargs[VALUE] = args[0]

        unknown = sorted(set(kwargs) - set(cls.__attributes__))
        if unknown:
            raise TypeError(f"{cls.__name__}() got unexpected attribute(s): {', '.join(unknown)}")

        values = {
            name: _normalize(default, kwargs[name])
            for name, default in cls.__attributes__.items()
            if name in kwargs
        }
        for name, group in cls.__mirrors__.items():
            explicit = [values[m] for m in sorted(group) if m in kwargs]
            if any(v != explicit[0] for v in explicit[1:]):
                raise AnnotationConfigurationError(
                    f"Mirrored attributes {sorted(group)} of annotation '{cls.__name__}' are"
                    f" declared with different values: {explicit}."
                )
            if name not in values and explicit:
                values[name] = explicit[0]
        for name, default in cls.__attributes__.items():
            if name in values:
                continue
            if default is MISSING:
                raise TypeError(f"{cls.__name__}() missing required attribute '{name}'")
            values[name] = default

        for name, value in values.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "__explicit__", frozenset(kwargs))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AnnotationModificationError(
            f"Attribute '{name}' of annotation '{type(self).__name__}' cannot be modified."
        )

    def __delattr__(self, name: str) -> NoReturn:
        raise AnnotationModificationError(
            f"Attribute '{name}' of annotation '{type(self).__name__}' cannot be deleted."
        )

    def attributes(self) -> dict[str, Any]:
        """Return the attribute values of the annotation, in declaration order."""
        return {name: getattr(self, name) for name in type(self).__attributes__}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.attributes() == other.attributes()

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.attributes().items())))

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self.attributes().items())
        return f"@{type(self).__name__}({values})"

    def __call__[T](self, target: T) -> T:
        """Apply the annotation to a class or a function and return the target unchanged."""
        annotate(target, self)
        return target


class SynthesizedAnnotation:
    """Implemented by annotation instances synthesized from a merged view."""

    __slots__ = ()


def _holder(target: Any) -> Any:
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target


def annotate(target: Any, annotation: Annotation) -> None:
    """Record an annotation on a class or a function. Stacked decorators apply bottom-up, the
    annotation is therefore inserted first to keep the declaration order.

    Raises:
        AnnotationTargetError: Raised when the target cannot carry annotations.
    """
    holder = _holder(target)
    attribute = Defaults.ANNOTATIONS_ATTRIBUTE
    if isinstance(holder, type):
        current = holder.__dict__.get(attribute, ())
        # bypass metaclasses refusing modifications (constants namespaces).
        type.__setattr__(holder, attribute, (annotation, *current))
    elif inspect.isfunction(holder):
        current = holder.__dict__.get(attribute, ())
        setattr(holder, attribute, (annotation, *current))
    else:
        raise AnnotationTargetError(
            f"{annotation!r} cannot be applied to {target!r}: only classes, functions, static"
            " methods and class methods can be annotated."
        )


def declared_annotations(target: Any) -> tuple[Annotation, ...]:
    """Annotations applied directly to a class or a function, in declaration order."""
    holder = _holder(target)
    if isinstance(holder, type) or inspect.isfunction(holder):
        return tuple(holder.__dict__.get(Defaults.ANNOTATIONS_ATTRIBUTE, ()))
    return ()


def annotations_from_hint(hint: Any) -> tuple[Annotation, ...]:
    """Annotations found in the typing.Annotated metadata of a type hint, looking through
    ClassVar and Final qualifiers."""
    found: list[Annotation] = []
    while True:
        origin = get_origin(hint)
        if origin is Annotated:
            found.extend(m for m in hint.__metadata__ if isinstance(m, Annotation))
            hint = hint.__origin__
        elif origin in (ClassVar, Final) and get_args(hint):
            hint = get_args(hint)[0]
        else:
            return tuple(found)


@lru_cache(maxsize=None)
def synthesized_type[A: Annotation](annotation_type: type[A]) -> type[A]:
    """The subclass of an annotation type used for synthesized instances."""
    return AnnotationMeta(
        f"{annotation_type.__name__}{Defaults.SYNTHESIZED_SUFFIX}",
        (annotation_type, SynthesizedAnnotation),
        {
            "__module__": annotation_type.__module__,
            "__qualname__": f"{annotation_type.__qualname__}{Defaults.SYNTHESIZED_SUFFIX}",
        },
    )
