"""Runtime settings for ingestion, projection and batch output."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {'1', 'true', 'yes', 'on'}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


STRICT_REQUIRED_FIELDS = _env_flag('TRADE_INGEST_STRICT', True)
JSON_INDENT = _env_int('TRADE_INGEST_JSON_INDENT', 2)
OUTPUT_DIR = os.getenv('TRADE_INGEST_OUTPUT_DIR', 'output')
LOG_LEVEL = _env_log_level('TRADE_INGEST_LOG_LEVEL', 'INFO')

TERMINAL_STATUSES = frozenset({'CANCELLED'})
