"""The marker of elements needing reflective access."""

from __future__ import annotations

from ..meta.annotations.model import Annotation, alias_for
from .processors import ProcessorReference, SimpleReflectiveProcessor


class Reflective(Annotation):
    """Mark a class, a constructor, a field or a method as needing reflective access at runtime.

    The marker can be applied directly or through another annotation type carrying it. The
    referenced processors register the hints of the marked element.

    Examples:
        >>> @Reflective()
        ... class Payload:
        ...     name: Annotated[str, Reflective()]
        ...
        ...     @Reflective(CustomProcessor)
        ...     def load(self) -> None: ...

        >>> @Reflective()
        ... class Endpoint(Annotation):
        ...     path: str = ""
    """

    value: tuple[ProcessorReference, ...] = (SimpleReflectiveProcessor,)
    processors: tuple[ProcessorReference, ...] = alias_for(
        "value", default=(SimpleReflectiveProcessor,)
    )
