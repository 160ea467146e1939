from __future__ import annotations
from typing import Iterable, List, Tuple, Union

import numpy as np

from .geom import Pt, PointLike, unique_points
from .hull import ConvexHull2D, extreme_points
from .predicates import orient2d


def convex_hull_2d(
    points: Union[Iterable[PointLike], np.ndarray],
    backend: str = "internal",
) -> Tuple[List[Pt], List[Pt]]:
    """
    Повний пайплайн:
      - приймає список (x, y)/Pt або numpy-масив форми (N, 2);
      - прибирає дублікати і відкидає NaN/inf;
      - будує оболонку нашим ConvexHull2D або через SciPy (Qhull) для звірки.

    Повертає:
      pts      — унікальні точки у порядку першої появи;
      boundary — вершини оболонки проти годинникової стрілки.
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"expected an (N, 2) array, got shape {arr.shape}")
        points = [(float(x), float(y)) for x, y in arr]
    pts: List[Pt] = unique_points(points)

    if backend.lower() == "internal":
        return pts, ConvexHull2D(pts).boundary()

    if backend.lower() == "scipy":
        try:
            from scipy.spatial import ConvexHull, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        # Qhull не будує оболонку для < 3 точок чи колінеарного набору — віддаємо крайні точки
        if len(pts) <= 2:
            return pts, sorted(pts, key=lambda p: (p.x, p.y))
        lo, hi = extreme_points(pts)
        if all(orient2d(lo, hi, p) == 0.0 for p in pts):
            return pts, [lo, hi]

        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        try:
            qh = ConvexHull(arr)
        except QhullError as e:
            # майже колінеарний набір: Qhull не може побудувати стартовий симплекс
            raise ValueError(f"Qhull не зміг побудувати оболонку для {len(pts)} точок") from e
        # у 2D scipy віддає vertices проти годинникової стрілки
        return pts, [pts[int(i)] for i in qh.vertices]

    raise ValueError(f"Невідомий backend: {backend}")
