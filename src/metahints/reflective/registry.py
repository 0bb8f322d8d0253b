"""Per registrar cache of processor instances."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from .. import logs as ls
from .errors import ProcessorConfigurationError
from .processors import ProcessorReference, ReflectiveProcessor


class ProcessorRegistry:
    """Resolve processor references to processor instances, at most one instance per reference.

    A reference is either a zero-argument factory (usually the processor class) or a key
    registered with `register`. The registry is not thread-safe.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], ReflectiveProcessor]] = {}
        self._instances: dict[ProcessorReference, ReflectiveProcessor] = {}

    def register(self, key: str, factory: Callable[[], ReflectiveProcessor]) -> None:
        """Register the factory of a processor under a key. Markers can then reference the
        processor by its key.

        Args:
            key (str): the key used in processor references.
            factory (Callable[[], ReflectiveProcessor]): creates the processor, called at most
                once.
        """
        self._factories[key] = factory
        self._instances.pop(key, None)
        logger.debug(ls.PROCESSOR_FACTORY_REGISTERED.format(key=key))

    def resolve(self, reference: ProcessorReference) -> ReflectiveProcessor:
        """The processor instance of a reference, created on first resolution.

        Args:
            reference (ProcessorReference): a processor factory or a registered key.

        Raises:
            ProcessorConfigurationError: Raised when the key is unknown, when the factory fails
                or when it does not create a ReflectiveProcessor.

        Returns:
            ReflectiveProcessor: the processor, the same instance for the same reference.
        """
        processor = self._instances.get(reference)
        if processor is None:
            processor = self._instances[reference] = self._instantiate(reference)
        return processor

    def _instantiate(self, reference: ProcessorReference) -> ReflectiveProcessor:
        if isinstance(reference, str):
            if reference not in self._factories:
                raise ProcessorConfigurationError(
                    f"No processor registered under key '{reference}'."
                )
            factory = self._factories[reference]
        else:
            factory = reference
        try:
            processor = factory()
        except Exception as e:
            raise ProcessorConfigurationError(f"Failed to instantiate {reference!r}.") from e
        if not isinstance(processor, ReflectiveProcessor):
            raise ProcessorConfigurationError(
                f"{reference!r} created {processor!r} which is not a ReflectiveProcessor."
            )
        logger.debug(ls.PROCESSOR_INSTANTIATED.format(processor=processor))
        return processor

    def __contains__(self, reference: ProcessorReference) -> bool:
        """Whether a reference has already been instantiated."""
        return reference in self._instances

    def clear(self) -> None:
        """Drop the cached instances. Registered factories are kept."""
        self._instances.clear()
