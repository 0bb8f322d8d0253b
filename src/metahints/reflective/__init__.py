"""Discovery of the elements marked with Reflective and registration of their hints."""

from .errors import InvalidEntryError, ProcessorConfigurationError
from .marker import Reflective
from .processors import (
    DelegatingReflectiveProcessor,
    ProcessorReference,
    ReflectiveProcessor,
    SimpleReflectiveProcessor,
)
from .registrar import Entry, EntryCollector, ReflectiveRuntimeHintsRegistrar
from .registry import ProcessorRegistry

__all__ = [
    # Marker
    "Reflective",
    # Processors
    "DelegatingReflectiveProcessor",
    "ProcessorReference",
    "ProcessorRegistry",
    "ReflectiveProcessor",
    "SimpleReflectiveProcessor",
    # Registrar
    "Entry",
    "EntryCollector",
    "ReflectiveRuntimeHintsRegistrar",
    # Errors
    "InvalidEntryError",
    "ProcessorConfigurationError",
]
