import pytest

from graalcuts.shapes import GraphicalCut, PolynomialCut

SQUARE = ((0, 0), (2, 0), (2, 2), (0, 2), (0, 0))


def test_square_contains_centre():
    cut = GraphicalCut("square", SQUARE)
    assert cut.is_inside(1.0, 1.0) is True


@pytest.mark.parametrize("x,y", [(3.0, 1.0), (-1.0, 1.0), (1.0, 3.0), (1.0, -0.5)])
def test_square_excludes_outside(x, y):
    cut = GraphicalCut("square", SQUARE)
    assert cut.is_inside(x, y) is False


def test_concave_polygon_notch_is_outside():
    # U shape: the notch between the arms is outside.
    shape = ((0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3))
    cut = GraphicalCut("u", shape)
    assert cut.is_inside(1.5, 2.0) is False
    assert cut.is_inside(0.5, 2.0) is True
    assert cut.is_inside(2.5, 2.0) is True


def test_empty_polygon_contains_nothing():
    cut = GraphicalCut("empty", ())
    assert cut.is_inside(0.0, 0.0) is False


def test_points_are_stored_as_float_tuples():
    cut = GraphicalCut("square", [[0, 0], [2, 0], [2, 2]])
    assert cut.points == ((0.0, 0.0), (2.0, 0.0), (2.0, 2.0))


def test_polygon_closure_does_not_change_result():
    open_cut = GraphicalCut("open", SQUARE[:-1])
    closed_cut = GraphicalCut("closed", SQUARE)
    for x, y in [(1.0, 1.0), (0.5, 1.5), (3.0, 3.0), (-0.1, 0.1)]:
        assert open_cut.is_inside(x, y) == closed_cut.is_inside(x, y)


def test_constant_polynomial():
    curve = PolynomialCut("c", (7.5,), 0.0, 1.0)
    assert curve(0.3) == 7.5
    assert curve.degree == 0


def test_linear_identity_polynomial():
    curve = PolynomialCut("id", (1.0, 0.0), -5.0, 5.0)
    for x in (-2.0, 0.0, 3.25):
        assert curve(x) == x


def test_polynomial_at_zero_is_constant_term():
    curve = PolynomialCut("p", (-184.90, 246.20, -107.40, 19.54), 0.03, 0.68)
    assert curve(0.0) == pytest.approx(19.54)


def test_in_range_bounds_inclusive():
    curve = PolynomialCut("p", (1.0, 0.0), 0.03, 0.68)
    assert curve.in_range(0.03)
    assert curve.in_range(0.68)
    assert not curve.in_range(0.02)
    assert not curve.in_range(0.69)


def test_polynomial_requires_coefficients():
    with pytest.raises(ValueError):
        PolynomialCut("p", (), 0.0, 1.0)


def test_polynomial_rejects_inverted_range():
    with pytest.raises(ValueError):
        PolynomialCut("p", (1.0,), 1.0, 0.0)