"""Trade domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class BuySell(Enum):
    BUY = 'BUY'
    SELL = 'SELL'


class TradeStatus(Enum):
    NEW = 'NEW'
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'


def _key(name: str):
    """Field carrying its external (projected) attribute name."""
    return field(default=None, metadata={'key': name})


def _check_type(name: str, value: object, expected: type) -> None:
    if value is not None and not isinstance(value, expected):
        raise ValueError(f'{name} must be {expected.__name__}, got {type(value).__name__}')


@dataclass(frozen=True)
class TradeHeader:
    """Identity, date and lifecycle status of a trade."""

    trade_id: str | None = _key('tradeId')
    trade_date: date | None = _key('tradeDate')
    trade_status: TradeStatus | None = _key('tradeStatus')

    def __post_init__(self) -> None:
        _check_type('trade_id', self.trade_id, str)
        _check_type('trade_date', self.trade_date, date)
        _check_type('trade_status', self.trade_status, TradeStatus)
        if self.trade_id is not None and not self.trade_id.strip():
            raise ValueError('trade_id must be non-empty')


@dataclass(frozen=True)
class TradeEconomics:
    """Direction, size and price of a trade. Notional is carried as stated, never derived."""

    direction: BuySell | None = _key('direction')
    quantity: Decimal | None = _key('quantity')
    price: Decimal | None = _key('price')
    currency: str | None = _key('currency')
    notional: Decimal | None = _key('notional')

    def __post_init__(self) -> None:
        _check_type('direction', self.direction, BuySell)
        for name in ('quantity', 'price', 'notional'):
            _check_type(name, getattr(self, name), Decimal)
        _check_type('currency', self.currency, str)
        code = self.currency
        if code is not None and not (len(code) == 3 and code.isascii() and code.isalpha()):
            raise ValueError(f'currency must be a 3-letter code, got {self.currency!r}')


@dataclass(frozen=True)
class TradeParties:
    buyer: str | None = _key('buyer')
    seller: str | None = _key('seller')
    broker: str | None = _key('broker')

    def __post_init__(self) -> None:
        for name in ('buyer', 'seller', 'broker'):
            _check_type(name, getattr(self, name), str)


@dataclass(frozen=True)
class Trade:
    header: TradeHeader | None = _key('tradeHeader')
    economics: TradeEconomics | None = _key('tradeEconomics')
    parties: TradeParties | None = _key('parties')

    def __post_init__(self) -> None:
        _check_type('header', self.header, TradeHeader)
        _check_type('economics', self.economics, TradeEconomics)
        _check_type('parties', self.parties, TradeParties)


@dataclass(frozen=True)
class TradeRoot:
    """Top-level unit exchanged at the ingestion and projection boundary."""

    trade: Trade = field(metadata={'key': 'trade'})

    def __post_init__(self) -> None:
        if not isinstance(self.trade, Trade):
            raise ValueError('TradeRoot requires a Trade')
