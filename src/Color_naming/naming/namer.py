# src/Color_naming/naming/namer.py
"""
Locale-aware color namer.

Queries take an OkLab (l, a, b) triple and a locale target (registered locale id
or inline ColorDictionary). Absent results are None / [] and never raise.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from Color_naming.dictionary.registry import DictionaryRegistry, LocaleRef
from Color_naming.dictionary.schema import (
    LEVELS,
    ColorDictionary,
    ColorName,
    ColorNameSet,
    Level,
    NamingOptions,
    TranslationResult,
    levels_up_to,
)
from Color_naming.index.kdtree import as_query
from Color_naming.naming.params import NamingParams, params_from_env

LocaleTarget = Union[str, ColorDictionary, LocaleRef]
ColorFactory = Callable[[Tuple[float, float, float]], Any]


def _as_tuple(coord: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return coord


class ColorNamer:
    """
    Does:
        Name colors, list nearest names, look names up and translate them between
        locales, on top of a DictionaryRegistry.

    color_factory wraps a bare OkLab triple into the caller's color type for every
    returned color (default: plain tuple).
    """

    def __init__(
        self,
        dictionaries: Iterable[ColorDictionary] = (),
        *,
        registry: Optional[DictionaryRegistry] = None,
        params: Optional[NamingParams] = None,
        color_factory: Optional[ColorFactory] = None,
    ) -> None:
        self.registry = registry if registry is not None else DictionaryRegistry()
        self.params = params or params_from_env()
        self._make_color: ColorFactory = color_factory or _as_tuple
        self.register(*dictionaries)

    def register(self, *dictionaries: ColorDictionary) -> None:
        for d in dictionaries:
            self.registry.register(d)

    def locales(self) -> List[str]:
        return self.registry.locales()

    def _color(self, name_set: ColorNameSet, index: int) -> Any:
        return self._make_color(name_set.coordinate(index))

    def _match(self, d: ColorDictionary, level: Level, index: int, distance: float) -> ColorName:
        name_set = d.tier(level)
        return ColorName(
            name=name_set.names[index],
            color=self._color(name_set, index),
            distance=float(distance),
            source=d.source,
            level=level,
        )

    # -----------------------------
    # queries
    # -----------------------------

    def name(
        self,
        coord: Sequence[float],
        locale: LocaleTarget,
        options: Optional[NamingOptions] = None,
        *,
        level: Optional[Union[Level, str]] = None,
        threshold: Optional[float] = None,
    ) -> Optional[ColorName]:
        """
        Does:
            Return the globally closest name across tiers [basic .. level].
            A tier's best is dropped when its distance exceeds threshold.

        Returns:
            None for an unknown locale or when nothing is within threshold.
            An unknown level searches no tier and also gives None.

        Raises:
            TypeError if options is combined with level/threshold keywords.
        """
        if options is not None and (level is not None or threshold is not None):
            raise TypeError("pass either options or level/threshold keywords, not both")
        opts = options if options is not None else NamingOptions(level=level, threshold=threshold)
        thr = opts.threshold if opts.threshold is not None else self.params.default_threshold
        return self._best(as_query(coord), locale, levels_up_to(opts.level), thr)

    def _best(
        self,
        query: Tuple[float, float, float],
        locale: LocaleTarget,
        levels: Sequence[Level],
        thr: Optional[float],
    ) -> Optional[ColorName]:
        resolved = self.registry.resolve(locale)
        if resolved is None:
            return None
        d = resolved.dictionary

        best: Optional[ColorName] = None
        for lv in levels:
            tree = self.registry.index_for(resolved, lv)
            if tree is None:
                continue

            res = tree.nearest(query)
            if not res.found:
                continue
            if thr is not None and res.distance > thr:
                continue

            if best is None or res.distance < best.distance:
                best = self._match(d, lv, res.index, res.distance)

        return best

    def nearest(
        self,
        coord: Sequence[float],
        locale: LocaleTarget,
        count: Optional[int] = None,
    ) -> List[ColorName]:
        """
        Does:
            Up to count names from all tiers, ascending by distance.

        Raises:
            ValueError if count <= 0.
        """
        n = self.params.nearest_count if count is None else int(count)
        if n <= 0:
            raise ValueError(f"count must be positive, got {n}")
        query = as_query(coord)

        resolved = self.registry.resolve(locale)
        if resolved is None:
            return []
        d = resolved.dictionary

        candidates: List[ColorName] = []
        for lv in LEVELS:
            tree = self.registry.index_for(resolved, lv)
            if tree is None:
                continue
            for res in tree.nearest_n(query, n):
                candidates.append(self._match(d, lv, res.index, res.distance))

        candidates.sort(key=lambda c: c.distance)
        return candidates[:n]

    def lookup(self, name: str, locale: LocaleTarget) -> Optional[Any]:
        """
        Does:
            Case-insensitive exact name lookup; tiers basic -> extended -> traditional,
            storage order inside a tier. First hit wins.
        """
        resolved = self.registry.resolve(locale)
        if resolved is None:
            return None
        hit = _find_name(resolved.dictionary, name)
        if hit is None:
            return None
        name_set, idx = hit
        return self._color(name_set, idx)

    def names(self, locale: LocaleTarget) -> List[ColorName]:
        resolved = self.registry.resolve(locale)
        if resolved is None:
            return []
        d = resolved.dictionary

        out: List[ColorName] = []
        for lv in d.present_levels():
            for i in range(len(d.tier(lv))):
                out.append(self._match(d, lv, i, 0.0))
        return out

    def translate(
        self,
        name: str,
        source_locale: LocaleTarget,
        target_locale: LocaleTarget,
    ) -> Optional[TranslationResult]:
        """
        Does:
            Resolve name in the source locale, then name that coordinate in the target
            locale over all tiers. distance is the OkLab gap between the two centroids.
        """
        resolved = self.registry.resolve(source_locale)
        if resolved is None:
            return None
        hit = _find_name(resolved.dictionary, name)
        if hit is None:
            return None
        name_set, idx = hit
        coord = name_set.coordinate(idx)

        # no level filter and no default threshold
        match = self._best(coord, target_locale, LEVELS, None)
        if match is None:
            return None

        return TranslationResult(
            name=match.name,
            source_color=self._make_color(coord),
            target_color=match.color,
            distance=match.distance,
        )


def _find_name(d: ColorDictionary, name: str) -> Optional[Tuple[ColorNameSet, int]]:
    key = str(name).casefold()
    for lv in LEVELS:
        name_set = d.tier(lv)
        if name_set is None:
            continue
        for i, n in enumerate(name_set.names):
            if n.casefold() == key:
                return name_set, i
    return None
