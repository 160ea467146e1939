from __future__ import annotations
from dataclasses import dataclass, field
from math import isfinite, sqrt
from typing import Iterable, List, Optional, Tuple, Union


class InvalidInputError(ValueError):
    """Вхідні координати не скінченні (NaN / ±inf)."""


@dataclass(frozen=True)
class Pt:
    """
    Точка площини. Рівність і хеш — лише за (x, y);
    label — підпис для виводу, на оболонку не впливає.
    """
    x: float
    y: float
    label: str = field(default="", compare=False)

    def __iter__(self):
        yield self.x; yield self.y

    def __str__(self) -> str:
        return f"{self.label}: {_num(self.x)}, {_num(self.y)}"


PointLike = Union[Pt, Tuple[float, float]]


def _num(v: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5"
    if float(v).is_integer():
        return str(int(v))
    return repr(float(v))


def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    """z-компонента векторного добутку a × b."""
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)


def as_points(points: Iterable[PointLike]) -> List[Pt]:
    """
    Привести вхід (Pt або пари (x, y)) до списку Pt.
    Нескінченні координати відкидаються одразу, ще до алгоритму.
    """
    out: List[Pt] = []
    for i, p in enumerate(points):
        if not isinstance(p, Pt):
            x, y = p
            p = Pt(float(x), float(y))
        if not (isfinite(p.x) and isfinite(p.y)):
            raise InvalidInputError(f"point #{i} has non-finite coordinates: ({p.x}, {p.y})")
        out.append(p)
    return out


def unique_points(points: Iterable[PointLike], scale: Optional[float] = None) -> List[Pt]:
    """
    Дедуплікація зі збереженням порядку першої появи.
    За замовчуванням — точна рівність координат;
    з `scale` — груба дедуплікація з квантуванням (scale=1e9 ≈ 1e-9 на координату).
    """
    pts = as_points(points)
    if scale is None:
        return list(dict.fromkeys(pts))
    seen: dict[Tuple[int, int], Pt] = {}
    for p in pts:
        key = (int(round(p.x*scale)), int(round(p.y*scale)))
        if key not in seen:
            seen[key] = p
    return list(seen.values())
