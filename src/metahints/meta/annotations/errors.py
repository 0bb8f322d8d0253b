"""Errors of the annotation model."""

from ...abstract.exceptions.traced_exceptions import MetaHintsError


class AnnotationError(MetaHintsError):
    """General error of the annotation model."""


class AnnotationConfigurationError(AnnotationError):
    """Signals a malformed annotation declaration: a broken alias, conflicting mirrored values
    or attributes that cannot be resolved."""


class AnnotationTargetError(AnnotationError):
    """Signals an annotation applied to an object that cannot carry annotations."""


class AnnotationModificationError(AnnotationError):
    """Signals an attempt to modify an annotation instance."""


class MissingAnnotationError(AnnotationError):
    """Signals an attribute access on a merged annotation that is not present."""
