"""XML trade loader: synonym lookup, typed extraction and model assembly."""

from __future__ import annotations

from collections.abc import Callable
import xml.etree.ElementTree as ET

from src import config
from src.data.errors import ExtractionError, IngestionError, MissingRequiredField
from src.data.extractors import parse_date, parse_decimal, parse_enum
from src.data.synonyms import find_section, resolve_text
from src.data.validator import missing_required, validate_required_fields
from src.models.trade import BuySell, Trade, TradeEconomics, TradeHeader, TradeParties, TradeRoot, TradeStatus
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)


def _text(raw: str, field: str) -> str:
    return raw


HEADER_FIELDS: dict[str, Callable] = {
    'trade_id': _text,
    'trade_date': parse_date,
    'trade_status': lambda raw, field: parse_enum(raw, TradeStatus, field),
}

ECONOMICS_FIELDS: dict[str, Callable] = {
    'direction': lambda raw, field: parse_enum(raw, BuySell, field),
    'quantity': parse_decimal,
    'price': parse_decimal,
    'currency': _text,
    'notional': parse_decimal,
}

PARTIES_FIELDS: dict[str, Callable] = {
    'buyer': _text,
    'seller': _text,
    'broker': _text,
}

SECTIONS: list[tuple[str, dict[str, Callable], type]] = [
    ('header', HEADER_FIELDS, TradeHeader),
    ('economics', ECONOMICS_FIELDS, TradeEconomics),
    ('parties', PARTIES_FIELDS, TradeParties),
]


def _extract_fields(element: ET.Element, extractors: dict[str, Callable]) -> dict[str, object]:
    values: dict[str, object] = {}
    for name, extract in extractors.items():
        raw = resolve_text(element, name)
        if raw is None:
            values[name] = None
            continue
        try:
            values[name] = extract(raw, name)
        except ExtractionError as exc:
            raise IngestionError(
                f'Invalid value for {name}: {raw!r} ({exc})',
                cause=exc,
                field=name,
                raw_value=raw,
            ) from exc
    return values


def _build_section(trade_el: ET.Element, section: str, extractors: dict[str, Callable], model: type, strict: bool):
    element = find_section(trade_el, section)
    if element is None:
        return None
    values = _extract_fields(element, extractors)
    if strict:
        missing = missing_required(section, values)
        if missing:
            raise MissingRequiredField(f'{section} is missing required fields: {missing}', field=missing[0])
    try:
        return model(**values)
    except ValueError as exc:
        raise IngestionError(f'Invalid {section}: {exc}', cause=exc) from exc


def build_trade(trade_el: ET.Element, strict: bool = True) -> Trade:
    """Assemble a Trade from a located trade element."""
    parts = {
        section: _build_section(trade_el, section, extractors, model, strict)
        for section, extractors, model in SECTIONS
    }
    return Trade(**parts)


def parse_document(raw_text: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(raw_text)
    except ET.ParseError as exc:
        raise IngestionError(f'Failed to parse XML document: {exc}', cause=exc) from exc


def ingest(raw_text: str | bytes, strict: bool | None = None) -> TradeRoot | None:
    """Ingest one XML document.

    Returns None when the document holds no trade element. Raises
    IngestionError for unparsable XML or invalid field content.
    """
    strict = config.STRICT_REQUIRED_FIELDS if strict is None else strict
    root = parse_document(raw_text)

    trade_el = find_section(root, 'trade')
    if trade_el is None:
        LOGGER.warning('Document has no trade element; nothing ingested.')
        return None

    trade = build_trade(trade_el, strict=strict)
    for warning in validate_required_fields(trade):
        LOGGER.warning(warning)

    header = trade.header
    LOGGER.debug('Ingested trade %s', header.trade_id if header is not None else 'N/A')
    return TradeRoot(trade=trade)


def load_trade_file(path: str) -> TradeRoot | None:
    """Read and ingest an XML trade file."""
    with open(path, 'rb') as f:
        raw = f.read()
    return ingest(raw)
