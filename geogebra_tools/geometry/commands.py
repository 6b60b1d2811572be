"""Build GeoGebra command strings from validated construction records."""

from decimal import Decimal

from geogebra_tools.geometry.specs import (
    CircleByCenterRadius,
    CircleByThreePoints,
    DeleteSpec,
    LineByEquation,
    LineByTwoPoints,
    Number,
    PointSpec,
    PolygonSpec,
    RawCommandSpec,
    SynthesizedCommand,
)


def format_number(value: Number) -> str:
    """Render a number the way GeoGebra reads it: 1 rather than 1.0, 0.00001 rather than 1e-05."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # shortest repr digits, laid out without an exponent
        return format(Decimal(repr(value)), "f")
    return str(value)


def point_command(spec: PointSpec) -> SynthesizedCommand:
    return SynthesizedCommand(f"{spec.name} = ({format_number(spec.x)}, {format_number(spec.y)})")


def circle_command(spec: CircleByCenterRadius | CircleByThreePoints) -> SynthesizedCommand:
    if isinstance(spec, CircleByCenterRadius):
        return SynthesizedCommand(
            f"{spec.name} = Circle({spec.center}, {format_number(spec.radius)})",
            {"method": "center-radius"},
        )
    return SynthesizedCommand(
        f"{spec.name} = Circle({spec.point1}, {spec.point2}, {spec.point3})",
        {"method": "three-point"},
    )


def polygon_command(spec: PolygonSpec) -> SynthesizedCommand:
    return SynthesizedCommand(
        f"{spec.name} = Polygon({', '.join(spec.vertices)})",
        {"vertexCount": len(spec.vertices)},
    )


def line_command(spec: LineByTwoPoints | LineByEquation) -> SynthesizedCommand:
    if isinstance(spec, LineByTwoPoints):
        return SynthesizedCommand(
            f"{spec.name} = Line({spec.point1}, {spec.point2})",
            {"method": "two-point"},
        )
    # GeoGebra names an equation with "name: equation", not assignment
    return SynthesizedCommand(f"{spec.name}: {spec.equation}", {"method": "equation"})


def raw_command(spec: RawCommandSpec) -> SynthesizedCommand:
    return SynthesizedCommand(spec.command)


def delete_command(spec: DeleteSpec) -> SynthesizedCommand:
    return SynthesizedCommand(f"Delete({spec.name})", {"deleted": spec.name})
