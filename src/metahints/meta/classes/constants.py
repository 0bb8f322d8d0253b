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
Created: 2025-07-11
Updated: 2026-10-18
Description: Namespaces (class) of constants. Used to hold the library defaults.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections.abc import Iterator
from typing import Any, ClassVar, NoReturn, get_origin

from ...abstract.exceptions.traced_exceptions import MetaHintsError


class ConstantsInstantiationError(MetaHintsError):
    """Signals an attempt to instantiate a namespace of constants."""


class ConstantsCompositionError(MetaHintsError):
    """Signals a namespace of constants that cannot be built."""


class ConstantsModificationError(MetaHintsError):
    """Signals an attempt to rebind or delete a constant."""


def _refuse_construction(name: str, namespace: dict[str, Any]) -> None:
    """A namespace of constants has no instances, defining how to build one is an error.

    Raises:
        ConstantsCompositionError: Raised when the namespace defines __new__ or __init__.
    """
    for function in ("__new__", "__init__"):
        if function in namespace:
            raise ConstantsCompositionError(
                f"Constant namespace '{name}' cannot define {function}, it is never instantiated."
            )


def _coerce(name: str, key: str, annotation: Any, value: Any) -> Any:
    """Convert a constant to its annotation when the annotation is a plain class. Parametrized
    annotations (tuple[int, ...], ClassVar[...]) are trusted.

    Raises:
        ConstantsCompositionError: Raised when the conversion fails.
    """
    if not isinstance(annotation, type) or get_origin(annotation) is not None:
        return value
    if isinstance(value, annotation):
        return value
    try:
        return annotation(value)
    except Exception as e:
        raise ConstantsCompositionError(
            f"Failed to coerce value {value!r} of constant '{name}.{key}' to {annotation.__name__}."
        ) from e


class ConstantsMetaclass(type):
    """Freeze the annotated attributes of a class as its constants. Constants of base namespaces
    come first, redeclared constants keep their inherited position."""

    __constants__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        allow_private: bool = False,
        **kwargs: Any,
    ) -> Any:
        _refuse_construction(name, namespace)
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        hints = inspect.get_annotations(cls, eval_str=True)
        declared = [k for k in hints if allow_private or not k.startswith("_")]
        inherited = [
            k for base in bases if isinstance(base, ConstantsMetaclass) for k in base.__constants__
        ]
        for key in declared:
            if key not in namespace:
                raise ConstantsCompositionError(
                    f"Constant '{name}.{key}' is declared without a value."
                )
            type.__setattr__(cls, key, _coerce(name, key, hints[key], namespace[key]))

        type.__setattr__(cls, "__constants__", tuple(dict.fromkeys([*inherited, *declared])))
        return cls

    def __call__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        raise ConstantsInstantiationError(
            f"'{cls.__name__}' is a namespace of constants, it has no instances."
        )

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise ConstantsModificationError(f"Constant '{cls.__name__}.{name}' is read-only.")

    def __delattr__(cls, name: str) -> NoReturn:
        raise ConstantsModificationError(f"Constant '{cls.__name__}.{name}' is read-only.")

    def __repr__(cls) -> str:
        return f"{cls.__name__}({', '.join(f'{k}={v!r}' for k, v in cls.items())})"

    def __iter__(cls) -> Iterator[str]:
        return iter(cls.__constants__)

    def __contains__(cls, name: object) -> bool:
        return name in cls.__constants__

    def items(cls) -> list[tuple[str, Any]]:
        """The (name, value) pairs of the constants, in declaration order."""
        return [(k, getattr(cls, k)) for k in cls.__constants__]


class ConstantNamespace(metaclass=ConstantsMetaclass):
    """Base class of namespaces of constants.

    Examples:
        >>> class Limits(ConstantNamespace):
        ...     DEPTH: int = 8.0  # coerced to 8
        ...     NAMES: tuple[str, ...] = ("a", "b")  # kept as is
        ...     _cache = {}  # not a constant
        ...     unannotated = 1  # not a constant

        >>> Limits.DEPTH
        8
        >>> Limits.DEPTH = 9  # raises ConstantsModificationError
    """

    __constants__: ClassVar[tuple[str, ...]]
