"""JSON projection of the trade model.

Keys follow model declaration order, dates are ISO-8601 calendar dates,
decimals are emitted as strings holding the exact stored literal and
absent optional values are omitted.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from src import config
from src.data.extractors import parse_date, parse_decimal, parse_enum
from src.models.trade import BuySell, Trade, TradeEconomics, TradeHeader, TradeParties, TradeRoot, TradeStatus
from src.utils.date_utils import format_iso_date

DERIVED_KEY = 'derived'


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        return to_record(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return format_iso_date(value)
    return value


def to_record(entity: Any) -> dict[str, Any]:
    """Convert a model entity to an ordered dict of JSON-ready values."""
    record: dict[str, Any] = {}
    for f in dataclasses.fields(entity):
        value = getattr(entity, f.name)
        if value is None:
            continue
        record[f.metadata.get('key', f.name)] = _plain(value)
    return record


def project(root: TradeRoot, derived: dict[str, Any] | None = None, indent: int | None = None) -> str:
    """Serialize a TradeRoot, optionally with rule outputs under 'derived'.

    Decimals come out as JSON strings (e.g. "1000000", "99.50") rather than
    JSON numbers, so consumers expecting numeric literals must convert them.
    """
    record = to_record(root)
    if derived:
        extra = {key: _plain(value) for key, value in derived.items() if value is not None}
        if extra:
            record[DERIVED_KEY] = extra
    return json.dumps(record, indent=config.JSON_INDENT if indent is None else indent, ensure_ascii=False)


def _keys(model: type) -> dict[str, str]:
    return {f.metadata.get('key', f.name): f.name for f in dataclasses.fields(model)}


_READERS = {
    'trade_date': parse_date,
    'trade_status': lambda raw, field: parse_enum(raw, TradeStatus, field),
    'direction': lambda raw, field: parse_enum(raw, BuySell, field),
    'quantity': parse_decimal,
    'price': parse_decimal,
    'notional': parse_decimal,
}


def _read_entity(model: type, record: dict[str, Any] | None):
    if record is None:
        return None
    keys = _keys(model)
    values = {}
    for key, raw in record.items():
        name = keys.get(key)
        if name is None:
            continue
        reader = _READERS.get(name)
        values[name] = reader(str(raw), name) if reader else raw
    return model(**values)


def read_projection(text: str) -> TradeRoot:
    """Rebuild a TradeRoot from projected JSON (the 'derived' block is ignored)."""
    record = json.loads(text)
    trade = record['trade']
    return TradeRoot(
        trade=Trade(
            header=_read_entity(TradeHeader, trade.get('tradeHeader')),
            economics=_read_entity(TradeEconomics, trade.get('tradeEconomics')),
            parties=_read_entity(TradeParties, trade.get('parties')),
        )
    )
