import json
from datetime import date
from decimal import Decimal

from src.data.loader import ingest
from src.pipeline import evaluate_rules
from src.reporting.projection import project, read_projection, to_record

DOC = """
<trade>
    <header><tradeId>T-9</tradeId><tradeDate>2024-01-05</tradeDate><status>confirmed</status></header>
    <economics>
        <direction>SELL</direction><quantity>1000000</quantity><price>99.50</price>
        <currency>EUR</currency><notional>99500000.00</notional>
    </economics>
    <parties><buyer>ACME</buyer><seller>Globex</seller></parties>
</trade>
"""


def test_key_order_follows_model() -> None:
    record = json.loads(project(ingest(DOC)))
    trade = record['trade']
    assert list(trade) == ['tradeHeader', 'tradeEconomics', 'parties']
    assert list(trade['tradeHeader']) == ['tradeId', 'tradeDate', 'tradeStatus']
    assert list(trade['tradeEconomics']) == ['direction', 'quantity', 'price', 'currency', 'notional']


def test_values_are_iso_and_exact() -> None:
    record = json.loads(project(ingest(DOC)))
    header = record['trade']['tradeHeader']
    economics = record['trade']['tradeEconomics']
    assert header['tradeDate'] == '2024-01-05'
    assert header['tradeStatus'] == 'CONFIRMED'
    assert economics['price'] == '99.50'
    assert economics['notional'] == '99500000.00'


def test_absent_optionals_are_omitted() -> None:
    doc = DOC.replace('<notional>99500000.00</notional>', '')
    record = json.loads(project(ingest(doc)))
    assert 'notional' not in record['trade']['tradeEconomics']
    assert 'broker' not in record['trade']['parties']
    assert 'null' not in project(ingest(doc))


def test_round_trip_reproduces_values() -> None:
    root = ingest(DOC)
    assert read_projection(project(root)) == root


def test_derived_block_follows_trade() -> None:
    root = ingest(DOC)
    record = json.loads(project(root, derived=evaluate_rules(root.trade)))
    assert list(record) == ['trade', 'derived']
    assert record['derived'] == {
        'calculatedNotional': '99500000.00',
        'isValid': True,
        'description': 'SELL 1000000 EUR at 99.50 between ACME and Globex',
        'isActive': True,
    }


def test_to_record_of_header() -> None:
    root = ingest(DOC)
    assert to_record(root.trade.header) == {
        'tradeId': 'T-9',
        'tradeDate': date(2024, 1, 5).isoformat(),
        'tradeStatus': 'CONFIRMED',
    }
    assert Decimal(json.loads(project(root))['trade']['tradeEconomics']['quantity']) == Decimal('1000000')
