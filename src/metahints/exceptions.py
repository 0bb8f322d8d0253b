"""
Re-export exceptions module for cleaner imports.

This allows: from metahints.exceptions import ProcessorConfigurationError
Instead of: from metahints.reflective.errors import ProcessorConfigurationError
"""

from .abstract.exceptions.traced_exceptions import MetaHintsError, TracedException, format_exception
from .meta.annotations.errors import (
    AnnotationError,
    AnnotationConfigurationError,
    AnnotationModificationError,
    AnnotationTargetError,
    MissingAnnotationError,
)
from .meta.classes.constants import (
    ConstantsCompositionError,
    ConstantsInstantiationError,
    ConstantsModificationError,
)
from .reflective.errors import InvalidEntryError, ProcessorConfigurationError

__all__ = [
    "TracedException",
    "format_exception",
    "MetaHintsError",
    "AnnotationError",
    "AnnotationConfigurationError",
    "AnnotationModificationError",
    "AnnotationTargetError",
    "MissingAnnotationError",
    "ConstantsCompositionError",
    "ConstantsInstantiationError",
    "ConstantsModificationError",
    "InvalidEntryError",
    "ProcessorConfigurationError",
]
