# src/Color_naming/io/data_schema.py
from __future__ import annotations

from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from Color_naming.dictionary.schema import LEVELS

CSV_COLUMNS = ["level", "name", "l_ok", "a_ok", "b_ok"]

_LEVEL_KEYS = {lv.value for lv in LEVELS}


class DataSchemaError(ValueError):
    pass


def _require_columns(df: pd.DataFrame, cols: Iterable[str], *, name: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise DataSchemaError(f"{name}: missing columns {missing}")


def validate_locale_table(df: pd.DataFrame, *, name: str) -> None:
    _require_columns(df, CSV_COLUMNS, name=name)

    levels = set(df["level"].astype(str).str.strip().str.lower())
    unknown = sorted(levels - _LEVEL_KEYS)
    if unknown:
        raise DataSchemaError(f"{name}: unknown levels {unknown}")

    coords = df[["l_ok", "a_ok", "b_ok"]].apply(pd.to_numeric, errors="coerce").to_numpy(float)
    bad = ~np.isfinite(coords).all(axis=1)
    if bad.any():
        rows = df.index[bad].tolist()[:5]
        raise DataSchemaError(f"{name}: non-numeric coordinates at rows {rows}")

    if df["name"].isna().any():
        raise DataSchemaError(f"{name}: empty names")


def validate_locale_mapping(obj: Any, *, name: str) -> None:
    if not isinstance(obj, Mapping):
        raise DataSchemaError(f"{name}: expected an object, got {type(obj).__name__}")

    locale = obj.get("locale")
    if not isinstance(locale, str) or not locale.strip():
        raise DataSchemaError(f"{name}: 'locale' must be a non-empty string")

    for lv in _LEVEL_KEYS:
        tier = obj.get(lv)
        if tier is None:
            continue
        if not isinstance(tier, Mapping):
            raise DataSchemaError(f"{name}: {lv} must be an object")
        missing = [k for k in ("names", "colors") if k not in tier]
        if missing:
            raise DataSchemaError(f"{name}: {lv} missing keys {missing}")
        if not isinstance(tier["names"], list) or not isinstance(tier["colors"], list):
            raise DataSchemaError(f"{name}: {lv}.names and {lv}.colors must be lists")
