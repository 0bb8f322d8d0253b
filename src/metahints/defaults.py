"""Library wide defaults."""

from abc import ABC
from typing import Generic, Protocol

from .meta.classes.constants import ConstantNamespace


class Defaults(ConstantNamespace):
    """Names and types shared by the annotation model, the reflection utilities and the
    registrar.
    """

    # attribute under which applied annotations are stored on classes and functions.
    ANNOTATIONS_ATTRIBUTE: str = "__metahints_annotations__"
    # attribute of the marker holding the processor references.
    MARKER_ATTRIBUTE: str = "value"
    CONSTRUCTOR_NAME: str = "__init__"
    SYNTHESIZED_SUFFIX: str = "Synthesized"
    # never walked for constructors, fields nor methods.
    IGNORED_TYPES: tuple[type, ...] = (object, ABC, Generic, Protocol)
