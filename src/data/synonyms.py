"""Synonym table mapping external XML tag names to canonical model fields.

Each canonical name lists its accepted source tags in lookup order; the
first tag present in the document wins. The table is read-only data and is
safe to share across threads.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

SECTION_SYNONYMS: dict[str, tuple[str, ...]] = {
    'trade': ('trade', 'Trade'),
    'header': ('header', 'tradeHeader'),
    'economics': ('economics', 'tradeEconomics'),
    'parties': ('parties', 'tradeParties'),
}

FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    'trade_id': ('tradeId', 'tradeIdentifier', 'id'),
    'trade_date': ('tradeDate', 'date'),
    'trade_status': ('status', 'tradeStatus'),
    'direction': ('direction', 'buySell', 'side'),
    'quantity': ('quantity', 'qty'),
    'price': ('price', 'unitPrice'),
    'currency': ('currency', 'ccy'),
    'notional': ('notional', 'notionalAmount'),
    'buyer': ('buyer', 'buyerParty'),
    'seller': ('seller', 'sellerParty'),
    'broker': ('broker', 'executingBroker'),
}

_TAG_TO_CANONICAL: dict[str, str] = {
    tag: name
    for table in (SECTION_SYNONYMS, FIELD_SYNONYMS)
    for name, tags in table.items()
    for tag in tags
}


def local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix from a tag."""
    return tag.rsplit('}', 1)[-1]


def canonical_name(source_path: str) -> str | None:
    """Map an external path such as 'trade/header/tradeId' to its canonical name."""
    leaf = source_path.strip('/').rsplit('/', 1)[-1]
    return _TAG_TO_CANONICAL.get(local_name(leaf))


def _first_descendant(element: ET.Element, tag: str) -> ET.Element | None:
    for node in element.iter():
        if node is not element and local_name(node.tag) == tag:
            return node
    return None


def find_section(element: ET.Element, section: str) -> ET.Element | None:
    """Locate a structural element (the trade or one of its sections).

    The trade element may be the document root itself.
    """
    for tag in SECTION_SYNONYMS[section]:
        if section == 'trade' and local_name(element.tag) == tag:
            return element
        node = _first_descendant(element, tag)
        if node is not None:
            return node
    return None


def resolve_text(element: ET.Element, field: str) -> str | None:
    """Return stripped text of the first synonym present, or None.

    Empty elements count as absent.
    """
    for tag in FIELD_SYNONYMS[field]:
        node = _first_descendant(element, tag)
        if node is None:
            continue
        text = ''.join(node.itertext()).strip()
        return text or None
    return None
