# src/Color_naming/index/kdtree.py
"""
3-d k-d tree over OkLab points.

Each node carries the index of its point in the source ColorNameSet, never the
name itself; callers map indices back through the set.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

Point = Tuple[float, float, float]

NO_INDEX = -1


@dataclass(frozen=True, slots=True)
class NearestResult:
    index: int
    distance: float

    @property
    def found(self) -> bool:
        return self.index != NO_INDEX


@dataclass(frozen=True, slots=True)
class _Node:
    point: Point
    index: int
    axis: int
    left: Optional["_Node"]
    right: Optional["_Node"]


def as_points(points) -> np.ndarray:
    """
    Does:
        Coerce a flat [l0, a0, b0, l1, ...] sequence or an (n, 3) array into an (n, 3) float array.

    Raises:
        ValueError if the flat length is not a multiple of 3 or the second axis is not 3.
    """
    arr = np.asarray(points, dtype=float)
    if arr.ndim == 1:
        if arr.size % 3 != 0:
            raise ValueError(f"flat coordinate array length {arr.size} is not a multiple of 3")
        return arr.reshape(-1, 3)
    if arr.ndim == 2 and arr.shape[1] == 3:
        return arr
    if arr.ndim == 2 and arr.shape[0] == 0:
        return arr.reshape(0, 3)
    raise ValueError(f"expected (n, 3) coordinates, got shape {arr.shape}")


def as_query(query: Sequence[float]) -> Point:
    try:
        l, a, b = (float(v) for v in query)
    except (TypeError, ValueError) as e:
        raise ValueError(f"query must be 3 numbers, got {query!r}") from e
    if not (math.isfinite(l) and math.isfinite(a) and math.isfinite(b)):
        raise ValueError(f"query must be finite, got {query!r}")
    return (l, a, b)


def _sq_dist(p: Point, q: Point) -> float:
    dl = p[0] - q[0]
    da = p[1] - q[1]
    db = p[2] - q[2]
    return dl * dl + da * da + db * db


class KDTree:
    """
    Immutable balanced k-d tree.

    Construction sorts each slice on axis = depth % 3 and takes the median
    (len >> 1) as the node. Sorting is stable, so equal keys keep input order.
    An empty input gives a tree with no root.
    """

    __slots__ = ("_root", "_size")

    def __init__(self, points) -> None:
        pts = as_points(points)
        self._size = int(pts.shape[0])
        self._root = self._build(pts, np.arange(self._size), 0)

    def __len__(self) -> int:
        return self._size

    @staticmethod
    def _build(pts: np.ndarray, idx: np.ndarray, depth: int) -> Optional[_Node]:
        if idx.size == 0:
            return None

        axis = depth % 3
        order = idx[np.argsort(pts[idx, axis], kind="stable")]
        mid = order.size >> 1
        i = int(order[mid])
        row = pts[i]

        return _Node(
            point=(float(row[0]), float(row[1]), float(row[2])),
            index=i,
            axis=axis,
            left=KDTree._build(pts, order[:mid], depth + 1),
            right=KDTree._build(pts, order[mid + 1 :], depth + 1),
        )

    def nearest(self, query: Sequence[float]) -> NearestResult:
        """
        Does:
            Single nearest neighbour by branch-and-bound descent.
            The far branch is visited only when the squared distance to the
            splitting plane is below the current best squared distance.

        Returns:
            NearestResult(NO_INDEX, inf) on an empty tree.
        """
        q = as_query(query)
        best_d = math.inf
        best_i = NO_INDEX

        def search(node: Optional[_Node]) -> None:
            nonlocal best_d, best_i
            if node is None:
                return

            d = _sq_dist(q, node.point)
            if d < best_d:
                best_d = d
                best_i = node.index

            diff = q[node.axis] - node.point[node.axis]
            if diff <= 0:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            search(near)
            if diff * diff < best_d:
                search(far)

        search(self._root)
        return NearestResult(index=best_i, distance=math.sqrt(best_d))

    def nearest_n(self, query: Sequence[float], k: int) -> List[NearestResult]:
        """
        Does:
            k nearest neighbours, ascending by distance (length <= k).
            Uses a bounded max-heap; the far branch is pruned against the
            heap's worst distance once it is full.

        Raises:
            ValueError if k <= 0.
        """
        k = int(k)
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")

        q = as_query(query)
        # heapq is a min-heap; store negated squared distances so heap[0] is the worst kept
        heap: List[Tuple[float, int]] = []

        def search(node: Optional[_Node]) -> None:
            if node is None:
                return

            d = _sq_dist(q, node.point)
            if len(heap) < k:
                heapq.heappush(heap, (-d, node.index))
            elif d < -heap[0][0]:
                heapq.heapreplace(heap, (-d, node.index))

            diff = q[node.axis] - node.point[node.axis]
            if diff <= 0:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            search(near)
            worst = math.inf if len(heap) < k else -heap[0][0]
            if diff * diff < worst:
                search(far)

        search(self._root)

        out = [NearestResult(index=i, distance=math.sqrt(-neg)) for neg, i in heap]
        out.sort(key=lambda r: r.distance)
        return out
