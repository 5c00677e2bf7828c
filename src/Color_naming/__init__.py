# src/Color_naming/__init__.py
from __future__ import annotations

# Stable re-exports (keep this list SHORT).
from Color_naming.dictionary.registry import DictionaryRegistry, LocaleRef
from Color_naming.dictionary.schema import (
    LEVELS,
    ColorDictionary,
    ColorName,
    ColorNameSet,
    DictionarySchemaError,
    Level,
    NamingOptions,
    TranslationResult,
)
from Color_naming.index.kdtree import KDTree, NearestResult
from Color_naming.naming.namer import ColorNamer
from Color_naming.naming.params import NamingParams, params_from_env

__all__ = [
    "LEVELS",
    "ColorDictionary",
    "ColorName",
    "ColorNameSet",
    "ColorNamer",
    "DictionaryRegistry",
    "DictionarySchemaError",
    "KDTree",
    "Level",
    "LocaleRef",
    "NamingOptions",
    "NamingParams",
    "NearestResult",
    "TranslationResult",
    "params_from_env",
]
