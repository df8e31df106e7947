"""Notional calculation."""

from __future__ import annotations

from decimal import Decimal

from src.models.trade import Trade


def calculate_trade_notional(trade: Trade) -> Decimal | None:
    """Exact quantity * price; None when economics, quantity or price is absent."""
    economics = trade.economics
    if economics is None or economics.quantity is None or economics.price is None:
        return None
    return economics.quantity * economics.price
