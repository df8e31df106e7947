"""Document and batch processing: ingest, evaluate rules, project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src import config
from src.calculations.checks import is_active_trade, validate_trade
from src.calculations.description import get_trade_description
from src.calculations.notional import calculate_trade_notional
from src.data.errors import IngestionError
from src.data.loader import ingest
from src.models.trade import Trade, TradeRoot
from src.reporting.projection import project
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass
class TradeResult:
    """Outcome of processing one document."""

    source: str
    root: TradeRoot | None = None
    derived: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    output_path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.root is not None and self.error is None

    @property
    def empty(self) -> bool:
        """No trade element in the document; not a failure."""
        return self.root is None and self.error is None


def evaluate_rules(trade: Trade) -> dict[str, Any]:
    """Run every rule evaluator over a trade, in projection order."""
    return {
        'calculatedNotional': calculate_trade_notional(trade),
        'isValid': validate_trade(trade),
        'description': get_trade_description(trade),
        'isActive': is_active_trade(trade),
    }


def process_document(raw_text: str | bytes, source: str = '<string>', strict: bool | None = None) -> TradeResult:
    """Ingest a document and evaluate rules. IngestionError propagates."""
    root = ingest(raw_text, strict=strict)
    if root is None:
        return TradeResult(source=source)
    return TradeResult(source=source, root=root, derived=evaluate_rules(root.trade))


def process_files(paths: list[str | Path], output_dir: str | Path | None = None) -> list[TradeResult]:
    """Process XML files one by one, writing <stem>.json per trade into output_dir.

    output_dir defaults to the configured OUTPUT_DIR. Failed files, whether
    on ingestion or on writing, are logged and recorded; the batch continues.
    """
    out_dir = Path(output_dir if output_dir is not None else config.OUTPUT_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)

    results: list[TradeResult] = []
    for raw_path in paths:
        path = Path(raw_path)
        LOGGER.info('Processing %s', path)
        try:
            result = process_document(path.read_bytes(), source=str(path))
        except (IngestionError, OSError) as exc:
            LOGGER.warning('Skipping %s: %s', path, exc)
            results.append(TradeResult(source=str(path), error=str(exc)))
            continue

        if result.root is None:
            LOGGER.info('No trade element in %s', path)
            results.append(result)
            continue

        target = out_dir / f'{path.stem}.json'
        try:
            target.write_text(project(result.root, derived=result.derived), encoding='utf-8')
        except OSError as exc:
            LOGGER.warning('Failed to save JSON for %s to %s: %s', path, target, exc)
            result.error = str(exc)
        else:
            result.output_path = target
            LOGGER.info('JSON saved to %s', target)
        results.append(result)
    return results
