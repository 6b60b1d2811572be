import math

import pytest

from geogebra_tools.geometry.specs import (
    CircleByCenterRadius,
    CircleByThreePoints,
    LineByEquation,
    LineByTwoPoints,
    PointSpec,
    PolygonSpec,
)
from geogebra_tools.geometry.validators import (
    Invalid,
    Valid,
    ValidationCategory,
    validate_circle_args,
    validate_coordinates,
    validate_equation,
    validate_line_args,
    validate_name,
    validate_point_args,
    validate_polygon_args,
    validate_radius,
    validate_vertices,
)


class TestName:
    @pytest.mark.parametrize("name", ["A", "c1", "poly_1", "lineAB", "P2"])
    def test_accepts(self, name):
        assert validate_name(name) == Valid(name)

    @pytest.mark.parametrize("name", ["123invalid", "_a", "a-b", "a b", "A!", "A\n", "A\nDelete(B)", 5, ["A"]])
    def test_rejects(self, name):
        outcome = validate_name(name)
        assert isinstance(outcome, Invalid)
        assert outcome.category is ValidationCategory.NAME
        assert "Invalid name" in outcome.reason

    def test_case_sensitive_names_are_kept(self):
        assert validate_name("Ab").value == "Ab"

    def test_missing(self):
        outcome = validate_name(None, "center")
        assert outcome.category is ValidationCategory.GENERIC
        assert outcome.reason == "Missing required parameter: center"


class TestCoordinates:
    def test_accepts_ints_and_floats(self):
        assert validate_coordinates(1, -2.5) == Valid((1, -2.5))

    def test_accepts_huge_int(self):
        assert validate_coordinates(10**400, 0).ok

    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan, "1", True, [1]])
    def test_rejects(self, x):
        outcome = validate_coordinates(x, 0)
        assert outcome.category is ValidationCategory.COORDINATES
        assert "Invalid coordinates" in outcome.reason

    def test_missing_y(self):
        assert validate_coordinates(1, None).reason == "Missing required parameter: y"


class TestRadius:
    @pytest.mark.parametrize("radius", [0.001, 1, 5.5])
    def test_accepts(self, radius):
        assert validate_radius(radius) == Valid(radius)

    @pytest.mark.parametrize("radius", [0, -5, -0.1, math.inf, math.nan, "5", False])
    def test_rejects(self, radius):
        outcome = validate_radius(radius)
        assert outcome.category is ValidationCategory.RADIUS
        assert "Invalid radius" in outcome.reason


class TestVertices:
    def test_accepts_list(self):
        assert validate_vertices(["A", "B", "C"]) == Valid(("A", "B", "C"))

    @pytest.mark.parametrize("vertices", [[], ["A"], ["A", "B"]])
    def test_too_few(self, vertices):
        outcome = validate_vertices(vertices)
        assert outcome.category is ValidationCategory.VERTICES
        assert "at least 3 vertices" in outcome.reason

    def test_bad_vertex_name(self):
        outcome = validate_vertices(["A", "B", "3C"])
        assert outcome.category is ValidationCategory.VERTICES
        assert "3C" in outcome.reason

    def test_trailing_newline_vertex_is_rejected(self):
        outcome = validate_vertices(["A", "B", "C\n"])
        assert outcome.category is ValidationCategory.VERTICES

    def test_not_a_list(self):
        assert validate_vertices("ABC").category is ValidationCategory.VERTICES


class TestEquation:
    @pytest.mark.parametrize(
        "equation",
        ["y = 2x + 3", "3x - 2y = 6", "y=x", "x = 4", "y = -0.5 * x + 1", "x^2 + y^2 = 9"],
    )
    def test_accepts(self, equation):
        assert validate_equation(equation).ok

    @pytest.mark.parametrize(
        "equation",
        [
            "invalid equation",
            "y = ",
            "= 3",
            "y = 2 = x",
            "y = 2x; Delete(A)",
            "a = b + 1",
            "4 = 4",
            "y = x\n+ 1",
            "y = x\nDelete(A) = 1",
            "y =\tx",
        ],
    )
    def test_rejects(self, equation):
        outcome = validate_equation(equation)
        assert outcome.category is ValidationCategory.EQUATION
        assert "Invalid equation" in outcome.reason

    def test_strips_whitespace(self):
        assert validate_equation("  y = x  ").value == "y = x"


def test_point_args_to_spec():
    assert validate_point_args({"name": "A", "x": 1, "y": 2}) == Valid(PointSpec("A", 1, 2))


def test_point_args_short_circuit_on_name():
    outcome = validate_point_args({"name": "1A", "x": math.inf, "y": 2})
    assert outcome.category is ValidationCategory.NAME


def test_circle_modes():
    by_center = validate_circle_args({"name": "c", "center": "O", "radius": 3})
    assert by_center.value == CircleByCenterRadius("c", "O", 3)

    by_points = validate_circle_args({"name": "c", "point1": "A", "point2": "B", "point3": "C"})
    assert by_points.value == CircleByThreePoints("c", "A", "B", "C")


def test_circle_radius_without_center():
    outcome = validate_circle_args({"name": "c", "radius": 3})
    assert outcome.reason == "Missing required parameter: center"


def test_circle_bad_reference():
    outcome = validate_circle_args({"name": "c", "center": "1O", "radius": 3})
    assert outcome.category is ValidationCategory.NAME


def test_polygon_args_to_spec():
    outcome = validate_polygon_args({"name": "q", "vertices": ["A", "B", "C", "D"]})
    assert outcome.value == PolygonSpec("q", ("A", "B", "C", "D"))


def test_line_modes():
    assert validate_line_args({"name": "l", "point1": "A", "point2": "B"}).value == LineByTwoPoints("l", "A", "B")
    assert validate_line_args({"name": "l", "equation": "y = x"}).value == LineByEquation("l", "y = x")


def test_line_single_point_selects_point_branch():
    outcome = validate_line_args({"name": "l", "point1": "A", "equation": "y = x"})
    assert outcome.reason == "Missing required parameter: point2"
