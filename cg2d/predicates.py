# cg2d/predicates.py
from __future__ import annotations
from enum import IntEnum

from .geom import Pt, sub, cross, norm


class Side(IntEnum):
    """Півплощина відносно орієнтованої прямої a -> b."""
    ABOVE = 1      # зліва від a -> b
    BELOW = -1     # справа
    ON_LINE = 0


def orient2d(a: Pt, b: Pt, p: Pt) -> float:
    """(b - a) × (p - a): >0 — p зліва, <0 — справа, 0 — колінеарні."""
    return cross(sub(b, a), sub(p, a))

def signed_distance_to_line(a: Pt, b: Pt, p: Pt) -> float:
    length = norm(sub(b, a))
    if length == 0.0:
        return 0.0
    return orient2d(a, b, p) / length

def side_of(a: Pt, b: Pt, p: Pt, eps: float = 0.0) -> Side:
    """
    Класифікація без ділення — працює і для вертикальних прямих.
    eps=0.0: ON_LINE лише при точному нулі.
    """
    o = orient2d(a, b, p)
    if o > eps:
        return Side.ABOVE
    if o < -eps:
        return Side.BELOW
    return Side.ON_LINE
