"""Declarative annotations and their merged view."""

from .errors import (
    AnnotationError,
    AnnotationConfigurationError,
    AnnotationModificationError,
    AnnotationTargetError,
    MissingAnnotationError,
)
from .model import (
    MISSING,
    AliasFor,
    Annotation,
    AnnotationMeta,
    SynthesizedAnnotation,
    alias_for,
    annotate,
    annotations_from_hint,
    declared_annotations,
    synthesized_type,
)
from .merged import (
    AnnotatedElement,
    MergedAnnotation,
    MergedAnnotations,
    SearchStrategy,
)

__all__ = [
    # Model
    "MISSING",
    "AliasFor",
    "Annotation",
    "AnnotationMeta",
    "SynthesizedAnnotation",
    "alias_for",
    "annotate",
    "annotations_from_hint",
    "declared_annotations",
    "synthesized_type",
    # Merged view
    "AnnotatedElement",
    "MergedAnnotation",
    "MergedAnnotations",
    "SearchStrategy",
    # Errors
    "AnnotationError",
    "AnnotationConfigurationError",
    "AnnotationModificationError",
    "AnnotationTargetError",
    "MissingAnnotationError",
]
