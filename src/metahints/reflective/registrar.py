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
Description: Register the runtime hints of the elements marked with Reflective. The classes
            given as roots are walked with their interfaces: the class itself, its declared
            constructors and every field and method of its hierarchy. Each marked element is
            paired with its processor and registered once, however many paths reach it.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from loguru import logger

from .. import logs as ls
from ..defaults import Defaults
from ..hints.runtime_hints import RuntimeHints
from ..hints.support import register_annotation_if_necessary
from ..meta.annotations.errors import AnnotationError
from ..meta.annotations.merged import MergedAnnotation, MergedAnnotations, SearchStrategy
from ..meta.annotations.model import Annotation
from ..meta.reflection.elements import Element, TypeElement
from ..meta.reflection.utilities import (
    all_interfaces,
    declared_constructors,
    do_with_fields,
    do_with_methods,
)
from .errors import InvalidEntryError
from .marker import Reflective
from .processors import DelegatingReflectiveProcessor, ReflectiveProcessor
from .registry import ProcessorRegistry


@dataclass(frozen=True)
class Entry:
    """A marked element paired with the processor registering its hints."""

    element: Element
    processor: ReflectiveProcessor


class EntryCollector:
    """Insertion ordered set of entries."""

    def __init__(self) -> None:
        self._entries: dict[Entry, None] = {}

    def add(self, entry: Entry) -> bool:
        """Add an entry. Returns whether it was not collected yet."""
        if entry in self._entries:
            return False
        self._entries[entry] = None
        return True

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries


class ReflectiveRuntimeHintsRegistrar:
    """Process the elements marked with Reflective.

    Processors are cached for the lifetime of the registrar and shared by successive
    registrations. A registrar is not meant to be used by several threads at once.

    Examples:
        >>> class Payload:
        ...     @Reflective()
        ...     def read(self) -> None: ...
        >>> hints = RuntimeHints()
        >>> ReflectiveRuntimeHintsRegistrar().register_runtime_hints(hints, Payload)
        >>> hints.reflection.get_type_hint(Payload)
        TypeHint(Payload, categories=[], constructors=0, fields=0, methods=1)
    """

    def __init__(
        self,
        processors: ProcessorRegistry | None = None,
        marker: type[Annotation] = Reflective,
    ) -> None:
        """
        Args:
            processors (ProcessorRegistry | None): the processor registry, a new one when None.
            marker (type[Annotation]): the marker annotation type. Its 'value' attribute holds
                the processor references.
        """
        self.processors = processors if processors is not None else ProcessorRegistry()
        self.marker = marker

    def register_runtime_hints(self, runtime_hints: RuntimeHints, *types: type) -> None:
        """Register the runtime hints of the marked elements of the given types.

        Args:
            runtime_hints (RuntimeHints): the hints to contribute to. Left untouched when no
                element is marked.
            *types (type): the root types to process.

        Raises:
            ProcessorConfigurationError: Raised when a referenced processor cannot be
                instantiated.
        """
        for entry in self.collect_entries(*types):
            logger.debug(
                ls.REGISTERING_ENTRY.format(element=entry.element, processor=entry.processor)
            )
            entry.processor.register_reflection_hints(runtime_hints.reflection, entry.element)
            self._register_annotation_if_necessary(runtime_hints, entry.element)

    def collect_entries(self, *types: type) -> EntryCollector:
        """Collect the entries of the marked elements of the given types and their interfaces."""
        entries = EntryCollector()
        for type_ in types:
            if not isinstance(type_, type):
                raise TypeError(f"{type_!r} is not a class.")
            self._process_type(entries, type_)
            for interface in all_interfaces(type_):
                self._process_type(entries, interface)
        logger.debug(ls.COLLECTED_ENTRIES.format(count=len(entries), roots=len(types)))
        return entries

    def _process_type(self, entries: EntryCollector, type_: type) -> None:
        logger.debug(ls.PROCESSING_TYPE.format(type=type_.__qualname__))
        element = TypeElement(type_)
        if self.is_reflective(element):
            entries.add(self.create_entry(element))
        for constructor in declared_constructors(type_):
            if self.is_reflective(constructor):
                entries.add(self.create_entry(constructor))
        do_with_fields(type_, lambda f: entries.add(self.create_entry(f)), self.is_reflective)
        do_with_methods(type_, lambda m: entries.add(self.create_entry(m)), self.is_reflective)

    def _find_marker(self, element: Element, strategy: SearchStrategy) -> MergedAnnotation[Any]:
        return MergedAnnotations.from_element(element, strategy).get(self.marker)

    def _references(self, element: Element) -> tuple[Any, ...] | None:
        """Processor references of the marker, in declaration order, without duplicates. None
        when the element is not marked."""
        marker = self._find_marker(element, SearchStrategy.TYPE_HIERARCHY)
        if not marker.is_present:
            return None
        return tuple(dict.fromkeys(marker.attribute(Defaults.MARKER_ATTRIBUTE)))

    def is_reflective(self, element: Element) -> bool:
        """Whether an element carries the marker, directly, through a meta-annotation or through
        the equivalent element of a base class. A marker that cannot be read or that references
        no processor does not count."""
        try:
            references = self._references(element)
        except (AnnotationError, AttributeError, TypeError) as e:
            logger.warning(ls.MALFORMED_MARKER.format(element=element, error=e))
            return False
        if references is not None and not references:
            logger.warning(
                ls.MALFORMED_MARKER.format(element=element, error="no processor referenced")
            )
        return bool(references)

    def create_entry(self, element: Element) -> Entry:
        """Pair a marked element with its processor: the processor itself when a single one is
        referenced, a delegating processor otherwise.

        Raises:
            InvalidEntryError: Raised when the element references no processor.
            ProcessorConfigurationError: Raised when a processor cannot be instantiated.
        """
        processors = [self.processors.resolve(r) for r in self._references(element) or ()]
        if not processors:
            raise InvalidEntryError("The marker references no processor.", element=element)
        if len(processors) == 1:
            return Entry(element, processors[0])
        return Entry(element, DelegatingReflectiveProcessor(processors))

    def _register_annotation_if_necessary(self, hints: RuntimeHints, element: Element) -> None:
        meta_source = self._find_marker(element, SearchStrategy.DIRECT).meta_source
        if meta_source is not None:
            logger.debug(ls.META_SOURCE_FOUND.format(element=element, annotation=meta_source))
            register_annotation_if_necessary(hints, meta_source)
