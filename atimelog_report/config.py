from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

DEFAULT_MINUTES_PER_UNIT = 3


@dataclass(frozen=True, slots=True)
class ReportConfig:
    input_path: Path
    minutes_per_unit: int = DEFAULT_MINUTES_PER_UNIT
    verbose: bool = False
    year: int = 2020


def _positive_int(name: str, raw: str) -> int:
    try:
        parsed = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc

    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value or not value.strip():
        return default
    return _positive_int(f"Environment variable {name}", value)


def log_level_from_env(default: int = logging.WARNING) -> int:
    value = os.getenv("ATIMELOG_LOG_LEVEL")
    if not value or not value.strip():
        return default

    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level in ATIMELOG_LOG_LEVEL: {value}")
    return level


def load_config(
    input_path: str | Path,
    *,
    minutes_per_unit: int | None = None,
    verbose: bool = False,
    year: int | None = None,
) -> ReportConfig:
    """Build the run configuration; explicit values win over the environment."""
    if minutes_per_unit is None:
        minutes_per_unit = _int_env("ATIMELOG_MINUTES_PER_UNIT", DEFAULT_MINUTES_PER_UNIT)
    else:
        minutes_per_unit = _positive_int("minutes_per_unit", str(minutes_per_unit))

    if year is None:
        year = _int_env("ATIMELOG_YEAR", date.today().year)
    else:
        year = _positive_int("year", str(year))

    return ReportConfig(
        input_path=Path(input_path),
        minutes_per_unit=minutes_per_unit,
        verbose=verbose,
        year=year,
    )
