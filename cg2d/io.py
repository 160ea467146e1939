from __future__ import annotations
from pathlib import Path
from typing import List, Union

from .geom import Pt


def point_label(index: int) -> str:
    """
    Підпис точки за її номером у файлі: A..Z, далі 1A..1Z, 2A.. тощо.
    """
    letter = chr(index % 26 + ord("A"))
    if index > 25:
        return f"{index // 26}{letter}"
    return letter


def parse_points(text: str) -> List[Pt]:
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y. Порожні рядки і коментарі (#) пропускаємо.
    Точки отримують підписи point_label() у порядку появи.
    """
    points: List[Pt] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'") from None
        points.append(Pt(x, y, point_label(len(points))))
    return points


def read_points(path: Union[str, Path]) -> List[Pt]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_points(f.read())


def format_point(p: Pt) -> str:
    """"<label>: <x>, <y>" — формат консольного виводу."""
    return str(p)
