"""Typed parsers turning raw field text into semantic values."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from src.data.errors import MalformedDate, MalformedNumber, UnknownEnumValue
from src.utils.date_utils import is_iso_date_text, to_calendar_date

E = TypeVar('E', bound=Enum)


def parse_date(raw: str, field: str | None = None) -> date:
    """Parse a YYYY-MM-DD calendar date; any other shape or an impossible day fails."""
    text = raw.strip()
    if not is_iso_date_text(text):
        raise MalformedDate(f'{field or "date"}: expected YYYY-MM-DD, got {raw!r}', field=field, raw_value=raw)
    try:
        return to_calendar_date(text)
    except (ValueError, OverflowError) as exc:
        raise MalformedDate(f'{field or "date"}: invalid calendar date {raw!r}', field=field, raw_value=raw) from exc


def parse_decimal(raw: str, field: str | None = None) -> Decimal:
    """Parse a decimal literal keeping every digit as written."""
    text = raw.strip()
    try:
        if '_' in text or not text.isascii():
            raise InvalidOperation(text)
        value = Decimal(text)
    except InvalidOperation as exc:
        raise MalformedNumber(f'{field or "number"}: not a decimal literal {raw!r}', field=field, raw_value=raw) from exc
    if not value.is_finite():
        raise MalformedNumber(f'{field or "number"}: not a finite decimal {raw!r}', field=field, raw_value=raw)
    return value


def enum_lookup(enum_cls: type[E]) -> dict[str, E]:
    """Explicit upper-cased text -> member table for a closed enumeration."""
    return {member.value.upper(): member for member in enum_cls}


def parse_enum(raw: str, enum_cls: type[E], field: str | None = None) -> E:
    """Case-insensitive match of raw text against a closed enumeration."""
    table = enum_lookup(enum_cls)
    member = table.get(raw.strip().upper())
    if member is None:
        expected = tuple(table)
        raise UnknownEnumValue(
            f'{field or enum_cls.__name__}: {raw!r} is not one of {list(expected)}',
            field=field,
            raw_value=raw,
            expected=expected,
        )
    return member
