import pytest

from cg2d.geom import Pt
from cg2d.hull import convex_hull
from cg2d.io import format_point, parse_points, point_label, read_points


@pytest.mark.parametrize("index, label", [(0, "A"), (25, "Z"), (26, "1A"), (27, "1B"), (52, "2A")])
def test_point_label(index, label):
    assert point_label(index) == label


def test_parse_points_skips_blank_and_comments():
    text = "# square\n0 0\n\n4 0\n4, 4\n  0   4  \n2 2\n"
    pts = parse_points(text)
    assert pts == [Pt(0, 0), Pt(4, 0), Pt(4, 4), Pt(0, 4), Pt(2, 2)]
    assert [p.label for p in pts] == ["A", "B", "C", "D", "E"]


def test_parse_points_reports_line_number():
    with pytest.raises(ValueError, match="Рядок 2"):
        parse_points("0 0\n1\n")
    with pytest.raises(ValueError, match="Рядок 1"):
        parse_points("x 1\n")


def test_read_points_and_format(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n4 0\n2 4\n2 1.5\n", encoding="utf-8")
    pts = read_points(path)
    hull = convex_hull(pts)
    assert sorted(format_point(p) for p in hull) == ["A: 0, 0", "B: 4, 0", "C: 2, 4"]
    assert format_point(pts[3]) == "D: 2, 1.5"
