"""Hints needed to read annotations at runtime."""

from __future__ import annotations

from typing import Any

from loguru import logger

from .. import logs as ls
from ..meta.annotations.merged import MergedAnnotation
from ..meta.annotations.model import Annotation, SynthesizedAnnotation
from .runtime_hints import MemberCategory, RuntimeHints


def register_synthesized_annotation(hints: RuntimeHints, annotation_type: type[Annotation]) -> None:
    """Register the hints needed to synthesize an annotation at runtime: its attributes are read
    reflectively and the synthesized instance is a proxy over the annotation type and
    SynthesizedAnnotation."""
    logger.debug(ls.SYNTHESIZED_ANNOTATION.format(type=annotation_type.__qualname__))
    hints.reflection.register_type(annotation_type, MemberCategory.INVOKE_DECLARED_METHODS)
    hints.proxies.register_proxy(annotation_type, SynthesizedAnnotation)


def register_annotation_if_necessary(
    hints: RuntimeHints, annotation: MergedAnnotation[Any]
) -> None:
    """Register the hints of a merged annotation when reading it needs a synthesized instance.
    No-op otherwise."""
    if annotation.is_synthesizable():
        register_synthesized_annotation(hints, annotation.type)
