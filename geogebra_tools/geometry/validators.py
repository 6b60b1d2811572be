"""
Semantic validation of tool arguments.

Every validator is total: it inspects whatever value the caller sent and
returns either Valid (carrying the typed record) or Invalid (carrying a
human-readable reason and a category). Nothing here raises.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from geogebra_tools.geometry.specs import (
    CircleByCenterRadius,
    CircleByThreePoints,
    DeleteSpec,
    LineByEquation,
    LineByTwoPoints,
    ObjectQuerySpec,
    PointSpec,
    PolygonSpec,
    RawCommandSpec,
)

NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
EQUATION_CHARS = re.compile(r"[A-Za-z0-9_ .+\-*/^(),=]+")
EQUATION_VARIABLE = re.compile(r"(?<![A-Za-z])[xy](?![A-Za-z])|(?<=\d)[xy]")
MIN_POLYGON_VERTICES = 3


class ValidationCategory(Enum):
    NAME = "name"
    COORDINATES = "coordinates"
    RADIUS = "radius"
    VERTICES = "vertices"
    EQUATION = "equation"
    GENERIC = "generic"


@dataclass(frozen=True)
class Valid:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    reason: str
    category: ValidationCategory = ValidationCategory.GENERIC

    @property
    def ok(self) -> bool:
        return False


ValidationOutcome = Valid | Invalid


def _is_finite_real(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _missing(field: str) -> Invalid:
    return Invalid(f"Missing required parameter: {field}")


def validate_name(value: Any, field: str = "name") -> ValidationOutcome:
    """Object names must start with a letter and contain only letters, digits or underscores."""
    if value is None or value == "":
        return _missing(field)
    if not isinstance(value, str) or not NAME_PATTERN.fullmatch(value):
        return Invalid(
            f"Invalid name '{value}' for {field}: names must start with a letter "
            "and contain only letters, digits or underscores",
            ValidationCategory.NAME,
        )
    return Valid(value)


def validate_coordinates(x: Any, y: Any) -> ValidationOutcome:
    if x is None:
        return _missing("x")
    if y is None:
        return _missing("y")
    if not (_is_finite_real(x) and _is_finite_real(y)):
        return Invalid(
            f"Invalid coordinates ({x}, {y}): x and y must be finite numbers",
            ValidationCategory.COORDINATES,
        )
    return Valid((x, y))


def validate_radius(value: Any) -> ValidationOutcome:
    if value is None:
        return _missing("radius")
    if not _is_finite_real(value) or value <= 0:
        return Invalid(
            f"Invalid radius {value}: radius must be a positive finite number",
            ValidationCategory.RADIUS,
        )
    return Valid(value)


def validate_vertices(value: Any) -> ValidationOutcome:
    if value is None:
        return _missing("vertices")
    if not isinstance(value, (list, tuple)):
        return Invalid(
            "Invalid vertices: expected a list of point names",
            ValidationCategory.VERTICES,
        )
    if len(value) < MIN_POLYGON_VERTICES:
        return Invalid(
            f"Polygon requires at least {MIN_POLYGON_VERTICES} vertices (got {len(value)})",
            ValidationCategory.VERTICES,
        )
    for vertex in value:
        if not isinstance(vertex, str) or not NAME_PATTERN.fullmatch(vertex):
            return Invalid(
                f"Invalid vertices: '{vertex}' is not a valid point name",
                ValidationCategory.VERTICES,
            )
    return Valid(tuple(value))


def validate_equation(value: Any) -> ValidationOutcome:
    """
    Surface check of a linear or functional equation such as "y = 2x + 3"
    or "3x - 2y = 6". The expression itself is left to the engine.
    """
    if value is None or value == "":
        return _missing("equation")
    if not isinstance(value, str):
        return Invalid("Invalid equation: expected a string", ValidationCategory.EQUATION)

    equation = value.strip()
    if equation.count("=") != 1:
        return Invalid(
            f"Invalid equation '{value}': expected the form '<expr> = <expr>'",
            ValidationCategory.EQUATION,
        )
    left, _, right = equation.partition("=")
    if not left.strip() or not right.strip():
        return Invalid(
            f"Invalid equation '{value}': both sides of '=' must be non-empty",
            ValidationCategory.EQUATION,
        )
    if not EQUATION_CHARS.fullmatch(equation):
        return Invalid(
            f"Invalid equation '{value}': unsupported characters",
            ValidationCategory.EQUATION,
        )
    if not EQUATION_VARIABLE.search(equation):
        return Invalid(
            f"Invalid equation '{value}': must reference x or y",
            ValidationCategory.EQUATION,
        )
    return Valid(equation)


def validate_command(value: Any) -> ValidationOutcome:
    if not isinstance(value, str) or not value.strip():
        return _missing("command")
    return Valid(value.strip())


def _present(arguments: dict[str, Any], *fields: str) -> bool:
    return any(arguments.get(f) is not None for f in fields)


def validate_point_args(arguments: dict[str, Any]) -> ValidationOutcome:
    outcome = validate_name(arguments.get("name"))
    if not outcome.ok:
        return outcome
    coords = validate_coordinates(arguments.get("x"), arguments.get("y"))
    if not coords.ok:
        return coords
    x, y = coords.value
    return Valid(PointSpec(name=outcome.value, x=x, y=y))


def validate_circle_args(arguments: dict[str, Any]) -> ValidationOutcome:
    """Center/radius wins over three points when both forms are supplied."""
    outcome = validate_name(arguments.get("name"))
    if not outcome.ok:
        return outcome
    name = outcome.value

    if _present(arguments, "center", "radius"):
        center = validate_name(arguments.get("center"), "center")
        if not center.ok:
            return center
        radius = validate_radius(arguments.get("radius"))
        if not radius.ok:
            return radius
        return Valid(CircleByCenterRadius(name=name, center=center.value, radius=radius.value))

    if _present(arguments, "point1", "point2", "point3"):
        points: list[str] = []
        for field in ("point1", "point2", "point3"):
            point = validate_name(arguments.get(field), field)
            if not point.ok:
                return point
            points.append(point.value)
        return Valid(CircleByThreePoints(name, *points))

    return Invalid(
        "Circle requires either 'center' and 'radius', or three points "
        "'point1', 'point2' and 'point3'"
    )


def validate_polygon_args(arguments: dict[str, Any]) -> ValidationOutcome:
    outcome = validate_name(arguments.get("name"))
    if not outcome.ok:
        return outcome
    vertices = validate_vertices(arguments.get("vertices"))
    if not vertices.ok:
        return vertices
    return Valid(PolygonSpec(name=outcome.value, vertices=vertices.value))


def validate_line_args(arguments: dict[str, Any]) -> ValidationOutcome:
    """Two points win over an equation when both forms are supplied."""
    outcome = validate_name(arguments.get("name"))
    if not outcome.ok:
        return outcome
    name = outcome.value

    if _present(arguments, "point1", "point2"):
        point1 = validate_name(arguments.get("point1"), "point1")
        if not point1.ok:
            return point1
        point2 = validate_name(arguments.get("point2"), "point2")
        if not point2.ok:
            return point2
        return Valid(LineByTwoPoints(name=name, point1=point1.value, point2=point2.value))

    if _present(arguments, "equation"):
        equation = validate_equation(arguments.get("equation"))
        if not equation.ok:
            return equation
        return Valid(LineByEquation(name=name, equation=equation.value))

    return Invalid("Line requires either 'point1' and 'point2', or an 'equation'")


def validate_eval_args(arguments: dict[str, Any]) -> ValidationOutcome:
    outcome = validate_command(arguments.get("command"))
    if not outcome.ok:
        return outcome
    return Valid(RawCommandSpec(command=outcome.value))


def validate_delete_args(arguments: dict[str, Any]) -> ValidationOutcome:
    outcome = validate_name(arguments.get("name"))
    if not outcome.ok:
        return outcome
    return Valid(DeleteSpec(name=outcome.value))


def validate_object_query_args(arguments: dict[str, Any]) -> ValidationOutcome:
    outcome = validate_name(arguments.get("name"))
    if not outcome.ok:
        return outcome
    return Valid(ObjectQuerySpec(name=outcome.value))
