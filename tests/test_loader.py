from datetime import date
from decimal import Decimal

import pytest

from src.data.errors import IngestionError, MalformedDate, MalformedNumber, MissingRequiredField, UnknownEnumValue
from src.data.loader import ingest, load_trade_file
from src.models.trade import BuySell, TradeRoot, TradeStatus


def _doc(
    status: str = 'NEW',
    trade_date: str = '2024-03-15',
    quantity: str = '1000000',
    extra_economics: str = '',
    parties: str = '<parties><buyer>ACME</buyer><seller>Globex</seller></parties>',
) -> str:
    return f"""
    <trade>
        <header>
            <tradeId>T-1</tradeId>
            <tradeDate>{trade_date}</tradeDate>
            <status>{status}</status>
        </header>
        <economics>
            <direction>buy</direction>
            <quantity>{quantity}</quantity>
            <price>99.5</price>
            <currency>USD</currency>
            {extra_economics}
        </economics>
        {parties}
    </trade>
    """


def test_ingest_builds_full_graph() -> None:
    root = ingest(_doc())
    assert isinstance(root, TradeRoot)
    header = root.trade.header
    assert header.trade_id == 'T-1'
    assert header.trade_date == date(2024, 3, 15)
    assert header.trade_status is TradeStatus.NEW
    economics = root.trade.economics
    assert economics.direction is BuySell.BUY
    assert economics.quantity == Decimal('1000000')
    assert economics.price == Decimal('99.5')
    assert economics.currency == 'USD'
    assert economics.notional is None
    assert root.trade.parties.broker is None


def test_ingest_is_idempotent() -> None:
    assert ingest(_doc()) == ingest(_doc())


def test_stated_notional_passes_through() -> None:
    root = ingest(_doc(extra_economics='<notional>12.30</notional>'))
    assert str(root.trade.economics.notional) == '12.30'


def test_status_any_case_maps_to_enum() -> None:
    root = ingest(_doc(status='cancelled'))
    assert root.trade.header.trade_status is TradeStatus.CANCELLED


def test_unknown_status_fails_with_enum_error() -> None:
    with pytest.raises(IngestionError) as excinfo:
        ingest(_doc(status='pending'))
    assert isinstance(excinfo.value.cause, UnknownEnumValue)
    assert excinfo.value.field == 'trade_status'
    assert excinfo.value.raw_value == 'pending'


def test_invalid_date_fails_with_date_error() -> None:
    with pytest.raises(IngestionError, match='2024-13-40') as excinfo:
        ingest(_doc(trade_date='2024-13-40'))
    cause = excinfo.value.cause
    assert isinstance(cause, MalformedDate)
    assert cause.field == 'trade_date'
    assert cause.raw_value == '2024-13-40'


def test_non_numeric_quantity_fails() -> None:
    with pytest.raises(IngestionError) as excinfo:
        ingest(_doc(quantity='lots'))
    assert isinstance(excinfo.value.cause, MalformedNumber)


def test_missing_trade_element_is_empty_result() -> None:
    assert ingest('<portfolio><position/></portfolio>') is None


def test_invalid_xml_is_ingestion_error() -> None:
    with pytest.raises(IngestionError, match='parse XML'):
        ingest('<trade><header></trade>')


def test_missing_required_field_strict() -> None:
    doc = '<trade><header><tradeDate>2024-03-15</tradeDate><status>NEW</status></header></trade>'
    with pytest.raises(MissingRequiredField, match='trade_id'):
        ingest(doc, strict=True)


def test_missing_required_field_permissive() -> None:
    doc = '<trade><header><tradeDate>2024-03-15</tradeDate><status>NEW</status></header></trade>'
    root = ingest(doc, strict=False)
    assert root.trade.header.trade_id is None
    assert root.trade.economics is None
    assert root.trade.parties is None


def test_missing_buyer_is_not_fatal(caplog) -> None:
    root = ingest(_doc(parties='<parties><seller>Globex</seller></parties>'))
    assert root.trade.parties.buyer is None
    assert 'buyer' in caplog.text


def test_bad_currency_is_wrapped() -> None:
    doc = _doc().replace('<currency>USD</currency>', '<currency>DOLLARS</currency>')
    with pytest.raises(IngestionError, match='currency'):
        ingest(doc)


def test_load_trade_file(tmp_path) -> None:
    path = tmp_path / 'trade.xml'
    path.write_text('<?xml version="1.0" encoding="UTF-8"?>' + _doc(), encoding='utf-8')
    root = load_trade_file(str(path))
    assert root.trade.header.trade_id == 'T-1'


def test_non_ascii_date_digits_fail() -> None:
    with pytest.raises(IngestionError) as excinfo:
        ingest(_doc(trade_date='٢٠٢٤-٠٣-١٥'))
    assert isinstance(excinfo.value.cause, MalformedDate)
