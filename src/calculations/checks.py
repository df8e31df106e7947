"""Boolean trade checks: validity and activity status."""

from __future__ import annotations

from src.config import TERMINAL_STATUSES
from src.models.trade import Trade


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def trade_validation_issues(trade: Trade) -> list[str]:
    """List every failed validity predicate; empty means the trade is valid."""
    issues: list[str] = []

    header = trade.header
    if header is None:
        issues.append('missing header')
    else:
        if _blank(header.trade_id):
            issues.append('missing tradeId')
        if header.trade_date is None:
            issues.append('missing tradeDate')
        if header.trade_status is None:
            issues.append('missing tradeStatus')

    economics = trade.economics
    if economics is None:
        issues.append('missing economics')
    else:
        if economics.direction is None:
            issues.append('missing direction')
        if economics.quantity is None or economics.quantity <= 0:
            issues.append('quantity must be positive')
        if economics.price is None or economics.price <= 0:
            issues.append('price must be positive')
        if _blank(economics.currency):
            issues.append('missing currency')

    parties = trade.parties
    if parties is None:
        issues.append('missing parties')
    else:
        if _blank(parties.buyer):
            issues.append('missing buyer')
        if _blank(parties.seller):
            issues.append('missing seller')
        if not _blank(parties.buyer) and parties.buyer == parties.seller:
            issues.append('buyer and seller are the same party')

    return issues


def validate_trade(trade: Trade) -> bool:
    return not trade_validation_issues(trade)


def is_active_trade(trade: Trade) -> bool:
    """False only when the trade status is terminal (e.g. CANCELLED)."""
    header = trade.header
    if header is None or header.trade_status is None:
        return True
    return header.trade_status.value not in TERMINAL_STATUSES
