from typing import Any

from geogebra_tools.geometry.commands import circle_command
from geogebra_tools.geometry.specs import CircleSpec, SynthesizedCommand
from geogebra_tools.geometry.validators import ValidationOutcome, validate_circle_args
from geogebra_tools.tools.base import ToolDefinition, ToolParameter
from geogebra_tools.tools.builtin.params import NAME_PARAM, point_ref


class CreateCircleTool:
    """Create a circle from center and radius, or through three points."""

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_create_circle",
            description=(
                "Create a circle in GeoGebra, either from a center point and a radius "
                "or through three points (point1, point2, point3). "
                "If both forms are given, center and radius are used."
            ),
            parameters=(
                NAME_PARAM,
                point_ref("center", "Name of the center point"),
                ToolParameter(
                    name="radius",
                    type="number",
                    description="Radius of the circle (must be positive)",
                    required=False,
                    exclusive_minimum=0,
                ),
                point_ref("point1", "First point on the circle"),
                point_ref("point2", "Second point on the circle"),
                point_ref("point3", "Third point on the circle"),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_circle_args(arguments)

    def synthesize(self, spec: CircleSpec) -> SynthesizedCommand:
        return circle_command(spec)
