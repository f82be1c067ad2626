"""Exceptions raised by typedetect."""


class TypeDetectError(Exception):
    """Base class for all typedetect errors."""


class NullValueError(TypeDetectError, ValueError):
    """A strict value predicate was called with ``None``."""

    def __init__(self, predicate: str):
        self.predicate = predicate
        super().__init__(
            f"{predicate}() does not accept None; "
            f"use {predicate}_nullable() for values that may be absent"
        )
