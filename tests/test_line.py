import math

import pytest

from cg2d.geom import Pt
from cg2d.line import Line
from cg2d.predicates import Side, orient2d, side_of, signed_distance_to_line


def test_classify_horizontal():
    line = Line(Pt(0, 0), Pt(4, 0))
    assert line.classify(Pt(1, 1)) == Side.ABOVE
    assert line.classify(Pt(1, -1)) == Side.BELOW
    assert line.classify(Pt(7, 0)) == Side.ON_LINE


def test_classify_depends_on_direction():
    line = Line(Pt(0, 0), Pt(4, 0))
    assert line.reversed().classify(Pt(1, 1)) == Side.BELOW


def test_vertical_line_has_no_slope_but_classifies():
    line = Line(Pt(0, 0), Pt(0, 5))
    assert line.is_vertical
    with pytest.raises(ValueError):
        line.slope_intercept()
    # зліва від напрямку вгору
    assert line.classify(Pt(-1, 2)) == Side.ABOVE
    assert line.classify(Pt(1, 2)) == Side.BELOW
    assert line.classify(Pt(0, 9)) == Side.ON_LINE
    assert line.perpendicular_distance(Pt(2, 1)) == 2.0


def test_steep_line_uses_cross_product():
    line = Line(Pt(0, 0), Pt(1, 100))
    assert line.classify(Pt(0.5, 60)) == Side.ABOVE
    assert line.classify(Pt(0.5, 40)) == Side.BELOW


def test_slope_intercept_roundtrip():
    line = Line.from_slope_intercept(2.0, -1.0)
    assert line.slope_intercept() == (2.0, -1.0)
    assert line.classify(Pt(3.0, 5.0)) == Side.ON_LINE
    assert Line(Pt(1, 1), Pt(3, 5)).slope_intercept() == (2.0, -1.0)


def test_distances():
    line = Line(Pt(0, 0), Pt(4, 0))
    assert line.signed_area(Pt(1, 3)) == 12
    assert line.signed_area(Pt(1, -3)) == -12
    assert line.area_distance(Pt(1, -3)) == 12
    assert line.perpendicular_distance(Pt(1, 3)) == 3.0
    assert math.isclose(Line(Pt(0, 0), Pt(1, 1)).perpendicular_distance(Pt(0, 2)), math.sqrt(2))


def test_degenerate_line_rejected():
    with pytest.raises(ValueError):
        Line(Pt(1, 1), Pt(1.0, 1.0, "other"))


def test_eps_widens_on_line_band():
    line = Line(Pt(0, 0), Pt(1, 0))
    assert line.classify(Pt(0.5, 1e-12)) == Side.ABOVE
    assert line.classify(Pt(0.5, 1e-12), eps=1e-9) == Side.ON_LINE


def test_predicates():
    a, b = Pt(0, 0), Pt(2, 0)
    assert orient2d(a, b, Pt(1, 1)) == 2
    assert side_of(a, b, Pt(1, -1)) == Side.BELOW
    assert signed_distance_to_line(a, b, Pt(1, 3)) == 3.0
    assert signed_distance_to_line(a, a, Pt(1, 3)) == 0.0


def test_str_names_endpoints():
    line = Line(Pt(0, 0, "A"), Pt(4, 0, "B"))
    assert str(line) == "AB: (0, 0) -> (4, 0)"
