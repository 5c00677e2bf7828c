# src/Color_naming/dictionary/registry.py
"""
Dictionary registry.

Owns the locale -> ColorDictionary map and a lazily filled cache of k-d trees
keyed by (locale, level). Registration merges per tier (first registration of a
tier wins) and drops every cached tree of the touched locale.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from Color_naming.dictionary.schema import LEVELS, ColorDictionary, Level, as_level
from Color_naming.index.kdtree import KDTree

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, Level]


class RefKind(str, Enum):
    REGISTERED = "registered"
    INLINE = "inline"


@dataclass(frozen=True, slots=True)
class LocaleRef:
    """
    Does:
        Tag a query target as either a registry key or an inline dictionary.
        Only REGISTERED refs may read or fill the index cache.
    """
    kind: RefKind
    locale: str
    dictionary: Optional[ColorDictionary] = None

    @classmethod
    def of(cls, target: Union[str, ColorDictionary, "LocaleRef"]) -> "LocaleRef":
        if isinstance(target, LocaleRef):
            return target
        if isinstance(target, str):
            return cls(kind=RefKind.REGISTERED, locale=target)
        if isinstance(target, ColorDictionary):
            return cls(kind=RefKind.INLINE, locale=target.locale, dictionary=target)
        raise TypeError(f"expected a locale id or ColorDictionary, got {type(target).__name__}")


@dataclass(frozen=True, slots=True)
class ResolvedDictionary:
    dictionary: ColorDictionary
    cacheable: bool


class DictionaryRegistry:
    def __init__(self) -> None:
        self._dicts: Dict[str, ColorDictionary] = {}
        self._trees: Dict[CacheKey, KDTree] = {}
        # one lock for merge+invalidate and for read-build-cache
        self._lock = threading.RLock()

    # -----------------------------
    # registration
    # -----------------------------

    def register(self, dictionary: ColorDictionary) -> List[Level]:
        """
        Does:
            Store a dictionary, or merge its tiers into the stored one for the same locale.
            Tiers already present are kept; absent ones are filled in.

        Returns:
            The tiers that were added (all present tiers on first registration).
        """
        if not isinstance(dictionary, ColorDictionary):
            raise TypeError(f"expected ColorDictionary, got {type(dictionary).__name__}")

        locale = dictionary.locale
        with self._lock:
            existing = self._dicts.get(locale)
            if existing is None:
                self._dicts[locale] = dataclasses.replace(dictionary)
                added = list(dictionary.present_levels())
                logger.debug("registry: stored locale=%s levels=%s", locale, [lv.value for lv in added])
            else:
                updates = {}
                skipped = []
                for lv in dictionary.present_levels():
                    if existing.tier(lv) is None:
                        updates[lv.value] = dictionary.tier(lv)
                    else:
                        skipped.append(lv.value)
                if skipped:
                    logger.debug("registry: locale=%s keeps existing levels=%s", locale, skipped)
                added = [as_level(k) for k in updates]
                if updates:
                    self._dicts[locale] = dataclasses.replace(existing, **updates)
                    logger.debug("registry: merged locale=%s levels=%s", locale, list(updates))

            if added:
                self.invalidate(locale)
        return added

    def invalidate(self, locale: str) -> List[CacheKey]:
        """
        Does:
            Drop cached trees for every level of a locale.
        """
        with self._lock:
            dropped = [k for k in ((locale, lv) for lv in LEVELS) if self._trees.pop(k, None) is not None]
        if dropped:
            logger.debug("registry: invalidated locale=%s keys=%d", locale, len(dropped))
        return dropped

    # -----------------------------
    # lookup
    # -----------------------------

    def get(self, locale: str) -> Optional[ColorDictionary]:
        with self._lock:
            return self._dicts.get(locale)

    def __contains__(self, locale: object) -> bool:
        with self._lock:
            return locale in self._dicts

    def locales(self) -> List[str]:
        with self._lock:
            return list(self._dicts)

    def cached_keys(self) -> List[CacheKey]:
        with self._lock:
            return list(self._trees)

    def resolve(self, target: Union[str, ColorDictionary, LocaleRef]) -> Optional[ResolvedDictionary]:
        """
        Does:
            Resolve a locale id through the registry, or pass an inline dictionary through.

        Returns:
            None for an unregistered locale id.
        """
        ref = LocaleRef.of(target)
        if ref.kind is RefKind.INLINE:
            return ResolvedDictionary(dictionary=ref.dictionary, cacheable=False)

        d = self.get(ref.locale)
        if d is None:
            return None
        return ResolvedDictionary(dictionary=d, cacheable=True)

    def index_for(self, resolved: ResolvedDictionary, level: Level) -> Optional[KDTree]:
        """
        Does:
            Return the tree for (locale, level): cached, or built from the tier's coordinates.
            Inline dictionaries are built every time and never cached.

        Returns:
            None when the tier is unknown, absent or empty.
        """
        level = as_level(level)
        if level is None:
            return None
        d = resolved.dictionary
        # built from the resolved snapshot; cached only if the registry still holds that tier object
        name_set = d.tier(level)
        if name_set is None or len(name_set) == 0:
            return None

        if not resolved.cacheable:
            logger.debug("registry: built uncached tree locale=%s level=%s n=%d", d.locale, level.value, len(name_set))
            return KDTree(name_set.colors)

        key = (d.locale, level)
        with self._lock:
            current = self._dicts.get(d.locale)
            fresh = current is not None and current.tier(level) is name_set
            if fresh:
                tree = self._trees.get(key)
                if tree is not None:
                    return tree

            tree = KDTree(name_set.colors)
            if fresh:
                self._trees[key] = tree
                logger.debug("registry: cached tree locale=%s level=%s n=%d", d.locale, level.value, len(name_set))
            else:
                logger.debug("registry: stale snapshot locale=%s level=%s, tree not cached", d.locale, level.value)
            return tree

    def clear(self) -> None:
        with self._lock:
            self._dicts.clear()
            self._trees.clear()
