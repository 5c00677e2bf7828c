# src/Color_naming/io/locales.py
"""
Locale table loading.

JSON tables (one object per locale, parallel names/colors per tier) and CSV tables
(one row per name) are turned into ColorDictionary values. Coordinates are taken
as given: precomputed OkLab centroids.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import numpy as np
import pandas as pd

from Color_naming.dictionary.schema import LEVELS, ColorDictionary, ColorNameSet, DictionarySchemaError
from Color_naming.io.data_schema import DataSchemaError, validate_locale_mapping, validate_locale_table
from Color_naming.naming.params import locale_dir_from_env

logger = logging.getLogger(__name__)


def _tier_counts(d: ColorDictionary) -> Dict[str, int]:
    return {lv.value: len(d.tier(lv)) for lv in d.present_levels()}


def dictionary_from_mapping(obj: Mapping[str, Any], *, name: str = "locale") -> ColorDictionary:
    """
    Does:
        Build a ColorDictionary from a parsed JSON-like mapping.

    Raises:
        DataSchemaError on missing keys or misaligned tiers.
    """
    validate_locale_mapping(obj, name=name)

    tiers: Dict[str, ColorNameSet] = {}
    for lv in LEVELS:
        raw = obj.get(lv.value)
        if raw is None:
            continue
        try:
            tiers[lv.value] = ColorNameSet(
                names=tuple(raw["names"]),
                colors=np.asarray(raw["colors"], dtype=float),
            )
        except (DictionarySchemaError, ValueError, TypeError) as e:
            raise DataSchemaError(f"{name}: invalid {lv.value} tier: {e}") from e

    return ColorDictionary(
        locale=str(obj["locale"]).strip(),
        source=str(obj.get("source") or ""),
        **tiers,
    )


def load_dictionary(path: Path) -> ColorDictionary:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataSchemaError(f"{p.name}: invalid JSON") from e

    d = dictionary_from_mapping(data, name=p.name)
    logger.debug("locales: loaded %s locale=%s tiers=%s", p, d.locale, _tier_counts(d))
    return d


def load_dictionary_csv(path: Path, *, locale: str, source: str = "") -> ColorDictionary:
    """
    Does:
        Load a long-format CSV (level, name, l_ok, a_ok, b_ok) into a ColorDictionary.
        Row order inside each level is kept as storage order.
    """
    p = Path(path)
    df = pd.read_csv(p)
    validate_locale_table(df, name=p.name)

    df = df.copy()
    df["level"] = df["level"].astype(str).str.strip().str.lower()
    df["name"] = df["name"].astype(str)

    tiers: Dict[str, ColorNameSet] = {}
    for lv in LEVELS:
        sub = df[df["level"] == lv.value]
        if sub.empty:
            continue
        tiers[lv.value] = ColorNameSet(
            names=tuple(sub["name"].tolist()),
            colors=sub[["l_ok", "a_ok", "b_ok"]].to_numpy(float),
        )

    d = ColorDictionary(locale=locale, source=source, **tiers)
    logger.debug("locales: loaded %s locale=%s tiers=%s", p, d.locale, _tier_counts(d))
    return d


def _locale_path(locale: str, data_dir: Optional[Path] = None) -> Path:
    return Path(data_dir or locale_dir_from_env()) / f"{locale}.json"


@lru_cache(maxsize=32)
def _load_cached(path: str) -> ColorDictionary:
    return load_dictionary(Path(path))


def load_locale(locale: str, *, data_dir: Optional[Path] = None) -> ColorDictionary:
    """
    Does:
        Load <data_dir>/<locale>.json (bundled tables unless CN_LOCALE_DATA_DIR is set).

    Raises:
        FileNotFoundError if no table exists for the locale.
    """
    p = _locale_path(locale, data_dir)
    if not p.exists():
        raise FileNotFoundError(f"no locale table for {locale!r} at {p}")
    return _load_cached(str(p.resolve()))


def available_locales(*, data_dir: Optional[Path] = None) -> List[str]:
    """
    Does:
        List locale ids with a JSON table in data_dir. The bundled set holds 27 locales
        (css-derived en, survey-derived de/fr/es, uwdata multilingual tables for the rest).
    """
    root = Path(data_dir or locale_dir_from_env())
    if not root.is_dir():
        return []
    return sorted(p.stem for p in root.glob("*.json"))
