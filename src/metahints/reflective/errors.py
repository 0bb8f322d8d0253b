"""Errors of the reflective hints registration."""

from ..abstract.exceptions.traced_exceptions import MetaHintsError


class ProcessorConfigurationError(MetaHintsError):
    """Signals a processor reference that cannot be resolved or instantiated. The hints of the
    whole registration would be incomplete, it is never recovered from."""


class InvalidEntryError(MetaHintsError):
    """Signals a marked element that resolves to no processor at all."""
