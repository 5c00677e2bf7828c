# src/Color_naming/dictionary/schema.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from Color_naming.index.kdtree import as_points


class DictionarySchemaError(ValueError):
    pass


# ---------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------

class Level(str, Enum):
    BASIC = "basic"
    EXTENDED = "extended"
    TRADITIONAL = "traditional"


# Specificity order; "up to X" always includes the coarser tiers.
LEVELS: Tuple[Level, ...] = (Level.BASIC, Level.EXTENDED, Level.TRADITIONAL)


def as_level(level: Any) -> Optional[Level]:
    """
    Does:
        Normalise a tier name or Level; None for anything that is not a known tier.
    """
    if isinstance(level, Level):
        return level
    try:
        return Level(str(level).strip().lower())
    except ValueError:
        return None


def levels_up_to(level: Optional[Any]) -> Tuple[Level, ...]:
    """
    Does:
        Return the tiers searched for "up to level" (inclusive); all tiers when level is None.
        An unknown level searches nothing.
    """
    if level is None:
        return LEVELS
    lv = as_level(level)
    if lv is None:
        return ()
    return LEVELS[: LEVELS.index(lv) + 1]


# ---------------------------------------------------------------------
# Data holders
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class ColorNameSet:
    """
    Does:
        Hold one tier as index-aligned (names, colors): names[i] <-> colors[i] (OkLab l, a, b).

    colors accepts a flat [l0, a0, b0, l1, ...] sequence or an (n, 3) array and is
    stored as a read-only (n, 3) float array.
    """
    names: Tuple[str, ...]
    colors: np.ndarray

    def __post_init__(self) -> None:
        try:
            pts = as_points(self.colors)
        except ValueError as e:
            raise DictionarySchemaError(str(e)) from e

        names = tuple(str(n) for n in self.names)
        if len(names) != pts.shape[0]:
            raise DictionarySchemaError(
                f"names/colors misaligned: {len(names)} names vs {pts.shape[0]} coordinates"
            )
        if not np.isfinite(pts).all():
            raise DictionarySchemaError("colors must be finite")

        pts = pts.copy()
        pts.setflags(write=False)
        object.__setattr__(self, "names", names)
        object.__setattr__(self, "colors", pts)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[str, Sequence[float]]]) -> "ColorNameSet":
        names = [n for n, _ in pairs]
        colors = np.asarray([list(c) for _, c in pairs], dtype=float).reshape(-1, 3)
        return cls(names=tuple(names), colors=colors)

    def __len__(self) -> int:
        return len(self.names)

    def coordinate(self, index: int) -> Tuple[float, float, float]:
        row = self.colors[index]
        return (float(row[0]), float(row[1]), float(row[2]))


@dataclass(frozen=True, slots=True)
class ColorDictionary:
    """
    Does:
        Bundle up to three tiers of one locale plus the attribution of its data.
    """
    locale: str
    source: str = ""
    basic: Optional[ColorNameSet] = None
    extended: Optional[ColorNameSet] = None
    traditional: Optional[ColorNameSet] = None

    def tier(self, level: Level) -> Optional[ColorNameSet]:
        lv = as_level(level)
        if lv is None:
            return None
        return getattr(self, lv.value)

    def present_levels(self) -> Tuple[Level, ...]:
        return tuple(lv for lv in LEVELS if self.tier(lv) is not None)


# ---------------------------------------------------------------------
# Query options / results
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NamingOptions:
    level: Optional[Level] = None
    threshold: Optional[float] = None

    def __post_init__(self) -> None:
        # unknown levels are kept as given; they search no tier
        if self.level is not None and as_level(self.level) is not None:
            object.__setattr__(self, "level", as_level(self.level))
        if self.threshold is not None:
            object.__setattr__(self, "threshold", float(self.threshold))


@dataclass(frozen=True, slots=True)
class ColorName:
    """
    Does:
        One naming match: name, canonical color of the name, Euclidean OkLab distance
        to the query (0 = exact), dictionary attribution and the tier it came from.
    """
    name: str
    color: Any
    distance: float
    source: str
    level: Level


@dataclass(frozen=True, slots=True)
class TranslationResult:
    name: str
    source_color: Any
    target_color: Any
    distance: float
