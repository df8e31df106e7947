"""Human-readable trade summary line."""

from __future__ import annotations

from src.models.trade import Trade

DESCRIPTION_TEMPLATE = '{direction} {quantity} {currency} at {price} between {buyer} and {seller}'
UNAVAILABLE = 'N/A'


def _show(value: object) -> str:
    if value is None:
        return UNAVAILABLE
    return str(getattr(value, 'value', value))


def get_trade_description(trade: Trade) -> str:
    economics = trade.economics
    parties = trade.parties
    return DESCRIPTION_TEMPLATE.format(
        direction=_show(economics.direction if economics else None),
        quantity=_show(economics.quantity if economics else None),
        currency=_show(economics.currency if economics else None),
        price=_show(economics.price if economics else None),
        buyer=_show(parties.buyer if parties else None),
        seller=_show(parties.seller if parties else None),
    )
