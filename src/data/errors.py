"""Ingestion failure taxonomy."""

from __future__ import annotations


class ExtractionError(ValueError):
    """Raw field text could not be converted to its semantic type."""

    def __init__(self, message: str, field: str | None = None, raw_value: str | None = None):
        super().__init__(message)
        self.field = field
        self.raw_value = raw_value


class MalformedDate(ExtractionError):
    pass


class MalformedNumber(ExtractionError):
    pass


class UnknownEnumValue(ExtractionError):
    def __init__(
        self,
        message: str,
        field: str | None = None,
        raw_value: str | None = None,
        expected: tuple[str, ...] = (),
    ):
        super().__init__(message, field=field, raw_value=raw_value)
        self.expected = expected


class IngestionError(Exception):
    """Document could not be turned into a trade; wraps the original cause."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        field: str | None = None,
        raw_value: str | None = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.field = field
        self.raw_value = raw_value


class MissingRequiredField(IngestionError):
    pass
