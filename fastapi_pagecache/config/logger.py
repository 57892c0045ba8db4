"""Logger configuration."""

import sys
from collections.abc import Mapping
from typing import Any

from loguru import logger

from .settings import settings

__all__ = ["config_logger"]


def config_logger(level: str | None = None) -> None:
    """Replace loguru's default sink with one formatted for this environment."""
    is_production = settings.app_env == "production"

    logger.remove()
    logger.add(
        sys.stderr,
        format=_production_format if is_production else _development_format,
        level=level or settings.log_level,
        colorize=not is_production,
        backtrace=not is_production,
        diagnose=False,
    )


def _production_format(record: Mapping[str, Any]) -> str:
    line = (
        f"{record['time'].strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]} | "
        f"{record['level']:<8} | "
        f"{record['name']}:{record['line']} - "
        "{message}"
    )
    if record["extra"]:
        line += " | {extra}"
    return line + "\n{exception}"


def _development_format(record: Mapping[str, Any]) -> str:
    ts = record["time"].strftime("%H:%M:%S.%f")[:-3]
    line = (
        f"<green>{ts}</green> | "
        f"<level>{record['level']:<8}</level> | "
        f"<cyan>{record['name']}:{record['function']}:{record['line']}</cyan> - "
        "{message}"
    )
    if record["extra"]:
        line += " | <yellow>{extra}</yellow>"
    return line + "\n{exception}"
