"""Required-field rules for ingested trades."""

from __future__ import annotations

from src.models.trade import Trade

REQUIRED_FIELDS: dict[str, list[str]] = {
    'header': ['trade_id', 'trade_date', 'trade_status'],
    'economics': ['direction', 'quantity', 'price', 'currency'],
    'parties': [],
}

EXPECTED_FIELDS: dict[str, list[str]] = {
    'parties': ['buyer', 'seller'],
}


def missing_required(section: str, values: dict[str, object]) -> list[str]:
    """Return required fields of a present section that resolved to nothing."""
    return [name for name in REQUIRED_FIELDS[section] if values.get(name) is None]


def validate_required_fields(trade: Trade) -> list[str]:
    """Validate a built trade and return non-fatal warnings."""
    warnings: list[str] = []

    for section in ('header', 'economics', 'parties'):
        if getattr(trade, section) is None:
            warnings.append(f'Trade has no {section} section.')

    if trade.header is not None:
        missing = [name for name in REQUIRED_FIELDS['header'] if getattr(trade.header, name) is None]
        if missing:
            warnings.append(f'Header is missing required fields: {missing}')

    if trade.economics is not None:
        missing = [name for name in REQUIRED_FIELDS['economics'] if getattr(trade.economics, name) is None]
        if missing:
            warnings.append(f'Economics is missing required fields: {missing}')
        quantity = trade.economics.quantity
        if quantity is not None and quantity <= 0:
            warnings.append(f'Quantity {quantity} is not positive.')

    if trade.parties is not None:
        missing = [name for name in EXPECTED_FIELDS['parties'] if getattr(trade.parties, name) is None]
        if missing:
            warnings.append(f'Parties are missing expected fields: {missing}')

    return warnings
