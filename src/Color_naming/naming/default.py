# src/Color_naming/naming/default.py
"""
Process-wide default namer.

Thin module-level helpers over one shared ColorNamer, for callers that do not
want to carry a namer around.
"""

from __future__ import annotations

import threading
from typing import Any, List, Optional, Sequence, Union

from Color_naming.dictionary.schema import ColorDictionary, ColorName, Level, TranslationResult
from Color_naming.naming.namer import ColorNamer, LocaleTarget

_lock = threading.Lock()
_default: Optional[ColorNamer] = None


def default_namer() -> ColorNamer:
    global _default
    with _lock:
        if _default is None:
            _default = ColorNamer()
        return _default


def reset_default_namer() -> None:
    global _default
    with _lock:
        _default = None


def use_locale(*dictionaries: ColorDictionary) -> None:
    default_namer().register(*dictionaries)


def name_color(
    coord: Sequence[float],
    locale: LocaleTarget,
    *,
    level: Optional[Union[Level, str]] = None,
    threshold: Optional[float] = None,
) -> Optional[ColorName]:
    return default_namer().name(coord, locale, level=level, threshold=threshold)


def nearest_colors(coord: Sequence[float], locale: LocaleTarget, count: Optional[int] = None) -> List[ColorName]:
    return default_namer().nearest(coord, locale, count)


def lookup_color(name: str, locale: LocaleTarget) -> Optional[Any]:
    return default_namer().lookup(name, locale)


def list_color_names(locale: LocaleTarget) -> List[ColorName]:
    return default_namer().names(locale)


def translate_color(name: str, source_locale: LocaleTarget, target_locale: LocaleTarget) -> Optional[TranslationResult]:
    return default_namer().translate(name, source_locale, target_locale)
