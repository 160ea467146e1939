from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .geom import Pt, PointLike, unique_points
from .line import Line
from .predicates import Side, orient2d

log = logging.getLogger(__name__)

SplitKey = Tuple[Pt, Pt, Side]   # орієнтоване ребро (a, b) + сторона, з якої шукали вершину


def _lex(p: Pt) -> Tuple[float, float]:
    return (p.x, p.y)


# ---------------- Примітиви Quickhull ----------------
def partition(points: Iterable[Pt], line: Line, side: Side, eps: float = 0.0) -> Set[Pt]:
    """Точки строго з боку `side` від `line`. Точки на прямій не потрапляють нікуди."""
    if side == Side.ON_LINE:
        raise ValueError("partition() takes Side.ABOVE or Side.BELOW")
    return {p for p in points if line.classify(p, eps) == side}


def farthest(points: Iterable[Pt], line: Line) -> Pt:
    """
    Найвіддаленіша від прямої точка.
    При рівних відстанях — лексикографічно найменша за (x, y), щоб результат не залежав від порядку обходу.
    """
    best: Optional[Pt] = None
    best_d = -1.0
    for p in points:
        d = line.area_distance(p)
        if d > best_d or (d == best_d and _lex(p) < _lex(best)):
            best, best_d = p, d
    assert best is not None, "farthest() called on an empty point set"
    return best


def find_hull_points(
    points: Iterable[Pt],
    border: Line,
    side: Side,
    splits: Optional[Dict[SplitKey, Pt]] = None,
    eps: float = 0.0,
) -> Set[Pt]:
    """
    Вершини оболонки, що лежать з боку `side` від ребра `border`.
    Передумова: усі `points` строго з цього боку (див. partition).

    Замість рекурсії — явний стек (глибина може бути O(n)).
    Нові ребра (a, F) і (F, b) зберігають орієнтацію border, тому «зовні» для них — та сама `side`.
    Якщо передано `splits`, для кожного розбитого ребра записуємо (a, b, side) -> F.
    """
    result: Set[Pt] = set()
    stack: List[Tuple[Set[Pt], Line]] = [(set(points), border)]
    while stack:
        pts, edge = stack.pop()
        if not pts:
            continue
        far = farthest(pts, edge)
        result.add(far)
        log.debug("split %s -> %s", edge, far)
        if splits is not None:
            splits[(edge.a, edge.b, side)] = far
        pts.discard(far)

        first = Line(edge.a, far)
        second = Line(far, edge.b)
        stack.append((partition(pts, first, side, eps), first))
        stack.append((partition(pts, second, side, eps), second))
    return result


def extreme_points(points: Iterable[Pt]) -> Tuple[Pt, Pt]:
    """Лексикографічно найменша і найбільша за (x, y) точки — завжди вершини оболонки."""
    pts = list(points)
    if not pts:
        raise ValueError("empty set")
    return min(pts, key=_lex), max(pts, key=_lex)


def _quickhull(
    pts: List[Pt], eps: float, splits: Optional[Dict[SplitKey, Pt]]
) -> Tuple[Set[Pt], Optional[Tuple[Pt, Pt]]]:
    """pts — вже без дублікатів і з перевіреними координатами."""
    if len(pts) <= 2:
        return set(pts), None

    lo, hi = extreme_points(pts)
    diameter = Line(lo, hi)
    log.debug("diameter %s -> %s over %d points", lo, hi, len(pts))

    rest = [p for p in pts if p != lo and p != hi]
    above = partition(rest, diameter, Side.ABOVE, eps)
    below = partition(rest, diameter, Side.BELOW, eps)

    result = {lo, hi}
    result |= find_hull_points(above, diameter, Side.ABOVE, splits, eps)
    result |= find_hull_points(below, diameter, Side.BELOW, splits, eps)
    log.debug("hull: %d of %d points", len(result), len(pts))
    return result, (lo, hi)


def convex_hull(points: Iterable[PointLike], eps: float = 0.0) -> Set[Pt]:
    """
    Вершини опуклої оболонки (без порядку обходу).
    Приймає Pt або пари (x, y); NaN/inf -> InvalidInputError.
    Колінеарні точки на межі до результату не входять — лише крайні.
    """
    vertices, _ = _quickhull(unique_points(points), eps, None)
    return vertices


class ConvexHull2D:
    """
    Quickhull на площині з журналом розбиттів.

    Вхід: ітерабельне Pt або (x, y); дублікати злипаються.
    Вихід: self.vertices — множина вершин (без порядку);
    boundary() відновлює обхід проти годинникової стрілки з журналу splits.

    `p in hull` — чи є p вершиною оболонки;
    hull.contains(p) — чи лежить p всередині або на межі (геометрична належність).
    """

    def __init__(self, points: Iterable[PointLike], eps: float = 0.0):
        self.P: List[Pt] = unique_points(points)
        self.eps = eps
        self.splits: Dict[SplitKey, Pt] = {}
        self.vertices, self.extremes = _quickhull(self.P, eps, self.splits)

    # ---------------- Публічний API ----------------
    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, p: object) -> bool:
        return p in self.vertices

    def discovered_against(self, p: Pt) -> Optional[Tuple[Pt, Pt]]:
        """Ребро, від якого знайдено вершину p; None для крайніх точок діаметра."""
        for (a, b, _side), far in self.splits.items():
            if far == p:
                return a, b
        return None

    def boundary(self) -> List[Pt]:
        """Вершини у порядку обходу проти годинникової стрілки, починаючи з найменшої."""
        if self.extremes is None:
            return sorted(self.vertices, key=_lex)
        lo, hi = self.extremes
        lower = self._chain(lo, hi, Side.BELOW)
        upper = self._chain(lo, hi, Side.ABOVE)
        return lower + [hi] + upper[1:][::-1]

    def edges(self) -> List[Tuple[Pt, Pt]]:
        ring = self.boundary()
        if len(ring) < 2:
            return []
        if len(ring) == 2:
            return [(ring[0], ring[1])]
        return list(zip(ring, ring[1:] + ring[:1]))

    def area(self) -> float:
        """Площа за формулою шнурування."""
        ring = self.boundary()
        if len(ring) < 3:
            return 0.0
        arr = np.array([(p.x, p.y) for p in ring], dtype=float)
        x, y = arr[:, 0], arr[:, 1]
        return 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))

    def contains(self, p: PointLike) -> bool:
        """Чи лежить p всередині або на межі оболонки."""
        q = p if isinstance(p, Pt) else Pt(float(p[0]), float(p[1]))
        ring = self.boundary()
        if not ring:
            return False
        if len(ring) == 1:
            return q == ring[0]
        if len(ring) == 2:
            a, b = ring
            if orient2d(a, b, q) != 0.0:
                return False
            return min(a.x, b.x) <= q.x <= max(a.x, b.x) and min(a.y, b.y) <= q.y <= max(a.y, b.y)
        return all(orient2d(a, b, q) >= -self.eps for a, b in self.edges())

    # ---------------- Внутрішні методи ----------------
    def _chain(self, a: Pt, b: Pt, side: Side) -> List[Pt]:
        """Ланцюжок вершин від a до b (b не включно) — in-order обхід журналу розбиттів."""
        out: List[Pt] = []
        stack = [(a, b)]
        while stack:
            u, v = stack.pop()
            far = self.splits.get((u, v, side))
            if far is None:
                out.append(u)
            else:
                stack.append((far, v))
                stack.append((u, far))
        return out

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожен поворот boundary() — строго лівий (опуклість, CCW);
          - жодна вхідна точка не лежить строго зовні якогось ребра.
        Повертає словник із діагностикою (порожні списки = все ок).
        Для координат порядку ±1e308 orient2d переповнюється (inf/nan),
        і outside_points може містити навіть вершини — точність float тут не гарантується.
        """
        ring = self.boundary()
        bad_turns: List[int] = []
        if len(ring) >= 3:
            n = len(ring)
            for i in range(n):
                a, b, c = ring[i], ring[(i + 1) % n], ring[(i + 2) % n]
                if orient2d(a, b, c) <= 0:
                    bad_turns.append(i)

        outside: List[Pt] = [p for p in self.P if not self.contains(p)]
        return {
            "vertices": len(ring),
            "points": len(self.P),
            "bad_turns": bad_turns,
            "outside_points": outside,
        }

    def to_off(self) -> str:
        """Експорт у OFF: вершини з z=0 і одна багатокутна грань (для 3+ вершин)."""
        ring = self.boundary()
        faces = 1 if len(ring) >= 3 else 0
        lines = ["OFF", f"{len(ring)} {faces} 0"]
        for p in ring:
            lines.append(f"{p.x} {p.y} 0.0")
        if faces:
            lines.append(" ".join([str(len(ring))] + [str(i) for i in range(len(ring))]))
        return "\n".join(lines)
