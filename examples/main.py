# examples/main.py
from __future__ import annotations

import logging
import sys

from cg2d.hull import convex_hull
from cg2d.io import format_point, read_points

FORMAT = "%(asctime)-15s %(message)s"


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(format=FORMAT, level=logging.INFO)

    # --- 1) Шлях до файлу: аргумент або запит у консолі ---
    if argv:
        file_path = argv[0]
    else:
        print("specify file path:")
        file_path = input().strip()

    # --- 2) Читання точок ---
    try:
        points = read_points(file_path)
    except (OSError, ValueError) as e:
        logging.error("cannot read points from %s: %s", file_path, e)
        return 1

    print("All Points:")
    for p in points:
        print(format_point(p))
    print()

    # --- 3) Оболонка ---
    try:
        hull = convex_hull(points)
    except ValueError as e:
        logging.error("invalid input: %s", e)
        return 1

    # порядок виводу — як у вхідному файлі
    print("Found points:")
    for p in points:
        if p in hull:
            print(format_point(p))
            hull.discard(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
