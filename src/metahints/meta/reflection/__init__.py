"""Reflective elements and the utilities walking them."""

from .elements import (
    ConstructorElement,
    Element,
    FieldElement,
    MethodElement,
    TypeElement,
)
from .utilities import (
    all_interfaces,
    declared_constructors,
    declared_fields,
    declared_methods,
    do_with_fields,
    do_with_methods,
    is_interface,
)

__all__ = [
    # Elements
    "ConstructorElement",
    "Element",
    "FieldElement",
    "MethodElement",
    "TypeElement",
    # Utilities
    "all_interfaces",
    "declared_constructors",
    "declared_fields",
    "declared_methods",
    "do_with_fields",
    "do_with_methods",
    "is_interface",
]
