"""Tabular batch summary and Excel export."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from src.pipeline import TradeResult

SUMMARY_SHEET = 'Trade_Summary'

SUMMARY_COLUMNS = [
    'source',
    'trade_id',
    'trade_date',
    'trade_status',
    'direction',
    'quantity',
    'price',
    'currency',
    'calculated_notional',
    'is_valid',
    'is_active',
    'error',
]


def _summary_row(result: TradeResult) -> dict[str, object]:
    row: dict[str, object] = {col: None for col in SUMMARY_COLUMNS}
    row['source'] = result.source
    row['error'] = result.error
    if result.root is None:
        return row

    trade = result.root.trade
    if trade.header is not None:
        row['trade_id'] = trade.header.trade_id
        row['trade_date'] = trade.header.trade_date
        row['trade_status'] = trade.header.trade_status.value if trade.header.trade_status else None
    if trade.economics is not None:
        row['direction'] = trade.economics.direction.value if trade.economics.direction else None
        row['quantity'] = trade.economics.quantity
        row['price'] = trade.economics.price
        row['currency'] = trade.economics.currency
    row['calculated_notional'] = result.derived.get('calculatedNotional')
    row['is_valid'] = result.derived.get('isValid')
    row['is_active'] = result.derived.get('isActive')
    return row


def build_trade_summary(results: list[TradeResult]) -> pd.DataFrame:
    """One row per processed document; decimals stay as Decimal objects."""
    df = pd.DataFrame([_summary_row(r) for r in results], columns=SUMMARY_COLUMNS)
    df['trade_date'] = pd.to_datetime(df['trade_date'])
    return df


def _column_index(ws, header: str) -> int:
    for col_idx in range(1, ws.max_column + 1):
        if ws.cell(row=1, column=col_idx).value == header:
            return col_idx
    raise KeyError(header)


def _format_worksheet(ws) -> None:
    ws.freeze_panes = 'A2'
    for col_idx in range(1, ws.max_column + 1):
        ws.cell(row=1, column=col_idx).font = Font(bold=True)

    date_col = _column_index(ws, 'trade_date')
    for row_idx in range(2, ws.max_row + 1):
        ws.cell(row=row_idx, column=date_col).number_format = 'YYYY-MM-DD'

    for col_idx in range(1, ws.max_column + 1):
        max_len = 0
        for row_idx in range(1, min(ws.max_row, 200) + 1):
            val = ws.cell(row=row_idx, column=col_idx).value
            max_len = max(max_len, len('' if val is None else str(val)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max(10, max_len + 2), 60)


def export_summary_workbook(summary: pd.DataFrame, path: str | Path) -> Path:
    """Write the summary to an .xlsx file; decimals are written as text to keep precision."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    out = summary.copy()
    for col in ('quantity', 'price', 'calculated_notional'):
        out[col] = out[col].map(lambda v: None if v is None or pd.isna(v) else str(v))

    with pd.ExcelWriter(target, engine='openpyxl') as writer:
        out.to_excel(writer, sheet_name=SUMMARY_SHEET, index=False)
        _format_worksheet(writer.sheets[SUMMARY_SHEET])
    return target
