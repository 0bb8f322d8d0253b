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
Description: Merged view over the annotations of an element. The view resolves
            meta-annotations (annotations carried by annotation types) and attribute aliases,
            and optionally searches the type hierarchy of the element.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum, auto
from typing import Any, Protocol, Self

from .errors import MissingAnnotationError
from .model import Annotation, declared_annotations, synthesized_type


class SearchStrategy(Enum):
    """Where to look for annotations.

    DIRECT: only the annotations declared on the element.
    TYPE_HIERARCHY: the element first, then the equivalent element of every class in the MRO of
        its declaring class (base classes, overridden methods, redeclared fields).
    """

    DIRECT = auto()
    TYPE_HIERARCHY = auto()


class AnnotatedElement(Protocol):
    """An element carrying annotations."""

    def declared_annotations(self) -> tuple[Annotation, ...]: ...

    def hierarchy(self) -> Iterator[AnnotatedElement]: ...


class MergedAnnotation[A: Annotation]:
    """An annotation found on an element, directly or through meta-annotations.

    The chain goes from the annotation declared on the element (the root) to the matched
    annotation. Attribute values are resolved along the chain: an attribute overridden by an
    annotation closer to the element takes the overriding value.
    """

    __slots__ = ("_chain", "_source", "_aggregate_index")

    def __init__(
        self,
        chain: tuple[Annotation, ...],
        source: Any = None,
        aggregate_index: int = 0,
    ) -> None:
        self._chain = chain
        self._source = source
        self._aggregate_index = aggregate_index

    @classmethod
    def missing(cls) -> MergedAnnotation[Any]:
        """A merged annotation that is not present."""
        return cls(())

    @property
    def is_present(self) -> bool:
        return bool(self._chain)

    @property
    def is_direct_present(self) -> bool:
        return len(self._chain) == 1

    def _require_present(self) -> None:
        if not self._chain:
            raise MissingAnnotationError("Unable to access a missing merged annotation.")

    @property
    def type(self) -> type[A]:
        self._require_present()
        return type(self._chain[-1])

    @property
    def distance(self) -> int:
        """Number of meta-annotation levels between the element and the annotation. -1 when
        missing."""
        return len(self._chain) - 1

    @property
    def aggregate_index(self) -> int:
        """Index of the hierarchy level where the root annotation was found."""
        return self._aggregate_index

    @property
    def source(self) -> Any:
        """The element declaring the root annotation."""
        return self._source

    @property
    def root(self) -> Annotation:
        self._require_present()
        return self._chain[0]

    @property
    def declared(self) -> A:
        """The annotation instance as declared, without alias resolution."""
        self._require_present()
        return self._chain[-1]  # type: ignore[return-value]

    @property
    def meta_source(self) -> MergedAnnotation[Any] | None:
        """The merged annotation carrying this one as a meta-annotation. None for annotations
        declared on the element and for missing annotations."""
        if len(self._chain) < 2:
            return None
        return MergedAnnotation(self._chain[:-1], self._source, self._aggregate_index)

    def _resolve(self, index: int, name: str) -> Any:
        target = type(self._chain[index])
        group = target.__mirrors__.get(name, frozenset((name,)))
        # overrides closer to the element win, the outermost first.
        for lower in range(index):
            for alias_name, alias in type(self._chain[lower]).__aliases__.items():
                if alias.annotation is target and alias.attribute in group:
                    return self._resolve(lower, alias_name)
        return getattr(self._chain[index], name)

    def attribute(self, name: str) -> Any:
        """The alias resolved value of an attribute.

        Args:
            name (str): name of the attribute.

        Raises:
            MissingAnnotationError: Raised when the annotation is missing.
            AttributeError: Raised when the annotation type declares no such attribute.

        Returns:
            Any: the attribute value.
        """
        self._require_present()
        if name not in self.type.__attributes__:
            raise AttributeError(f"Annotation '{self.type.__name__}' declares no attribute '{name}'.")
        return self._resolve(len(self._chain) - 1, name)

    def attributes(self) -> dict[str, Any]:
        """All alias resolved attribute values, in declaration order."""
        self._require_present()
        return {name: self.attribute(name) for name in self.type.__attributes__}

    def is_synthesizable(self) -> bool:
        """Whether reading the annotation needs a synthesized instance: the type declares
        mirrored attributes or aliases for meta-annotation attributes, or an annotation closer
        to the element overrides one of its attributes."""
        if not self._chain:
            return False
        target = self.type
        if target.__mirrors__:
            return True
        if any(not alias.is_mirror for alias in target.__aliases__.values()):
            return True
        return any(
            alias.annotation is target
            for annotation in self._chain[:-1]
            for alias in type(annotation).__aliases__.values()
        )

    def synthesize(self) -> A:
        """An annotation instance carrying the resolved attribute values. Instances of
        synthesizable annotations also derive from SynthesizedAnnotation."""
        self._require_present()
        if not self.is_synthesizable():
            return self.declared
        return synthesized_type(self.type)(**self.attributes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergedAnnotation):
            return NotImplemented
        return self._chain == other._chain and self._source == other._source

    def __hash__(self) -> int:
        return hash((self._chain, self._source))

    def __repr__(self) -> str:
        if not self._chain:
            return "MergedAnnotation(missing)"
        path = " -> ".join(type(a).__name__ for a in self._chain)
        return f"MergedAnnotation({path}, distance={self.distance})"


def _meta_chains(root: Annotation) -> Iterator[tuple[Annotation, ...]]:
    """Breadth first walk of the meta-annotations reachable from a root annotation. A type
    already visited from the same root is not visited again."""
    visited = {type(root)}
    queue = deque([(root,)])
    while queue:
        chain = queue.popleft()
        yield chain
        for meta in declared_annotations(type(chain[-1])):
            if type(meta) in visited:
                continue
            visited.add(type(meta))
            queue.append((*chain, meta))


class MergedAnnotations:
    """Merged view of the annotations of an element."""

    def __init__(self, aggregates: Iterable[tuple[Any, tuple[Annotation, ...]]]) -> None:
        self._aggregates = list(aggregates)

    @classmethod
    def from_element(
        cls, element: AnnotatedElement, strategy: SearchStrategy = SearchStrategy.DIRECT
    ) -> Self:
        """Create the view of an element.

        Args:
            element (AnnotatedElement): the element.
            strategy (SearchStrategy): where to look for annotations.

        Returns:
            MergedAnnotations: the merged view.
        """
        if strategy is SearchStrategy.DIRECT:
            sources: Iterable[AnnotatedElement] = (element,)
        else:
            sources = element.hierarchy()
        return cls((source, source.declared_annotations()) for source in sources)

    @classmethod
    def from_annotations(cls, annotations: Iterable[Annotation], source: Any = None) -> Self:
        """Create the view of annotations that are not attached to an element."""
        return cls([(source, tuple(annotations))])

    def __iter__(self) -> Iterator[MergedAnnotation[Any]]:
        for index, (source, roots) in enumerate(self._aggregates):
            merged = [
                MergedAnnotation(chain, source, index)
                for root in roots
                for chain in _meta_chains(root)
            ]
            yield from sorted(merged, key=lambda m: m.distance)

    def stream[A: Annotation](self, annotation_type: type[A]) -> Iterator[MergedAnnotation[A]]:
        """All the merged annotations of a type, nearest first."""
        return (m for m in self if type(m.declared) is annotation_type)

    def get[A: Annotation](self, annotation_type: type[A]) -> MergedAnnotation[A]:
        """The nearest merged annotation of a type, or a missing merged annotation."""
        return next(self.stream(annotation_type), MergedAnnotation.missing())

    def is_present(self, annotation_type: type[Annotation]) -> bool:
        return self.get(annotation_type).is_present
