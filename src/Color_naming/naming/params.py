# src/Color_naming/naming/params.py
"""
Naming defaults.

Environment-driven parameters for the naming engine and locale loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _package_root() -> Path:
    return Path(__file__).resolve().parents[1]


def default_locale_dir() -> Path:
    return _package_root() / "data" / "locales"


@dataclass(frozen=True, slots=True)
class NamingParams:
    # nearest(): candidates returned when count is omitted
    nearest_count: int = 5

    # name(): threshold applied when the caller gives none (None => unbounded)
    default_threshold: Optional[float] = None


def params_from_env() -> NamingParams:
    def _i(name: str, default: int) -> int:
        try:
            return int(os.environ.get(name, default))
        except Exception:
            return int(default)

    def _opt_f(name: str) -> Optional[float]:
        raw = os.environ.get(name, "").strip()
        if not raw:
            return None
        try:
            return float(raw)
        except Exception:
            return None

    count = _i("CN_NEAREST_COUNT", 5)
    return NamingParams(
        nearest_count=count if count > 0 else 5,
        default_threshold=_opt_f("CN_NAME_THRESHOLD"),
    )


def locale_dir_from_env() -> Path:
    raw = os.environ.get("CN_LOCALE_DATA_DIR", "").strip()
    return Path(raw) if raw else default_locale_dir()
