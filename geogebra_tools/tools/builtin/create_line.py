from typing import Any

from geogebra_tools.geometry.commands import line_command
from geogebra_tools.geometry.specs import LineSpec, SynthesizedCommand
from geogebra_tools.geometry.validators import ValidationOutcome, validate_line_args
from geogebra_tools.tools.base import ToolDefinition, ToolParameter
from geogebra_tools.tools.builtin.params import NAME_PARAM, point_ref


class CreateLineTool:
    """Create a line through two existing points or from an equation."""

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_create_line",
            description=(
                "Create a line in GeoGebra, either through two existing points "
                "(point1, point2) or from an equation such as 'y = 2x + 3'. "
                "If both are given, the two points are used."
            ),
            parameters=(
                NAME_PARAM,
                point_ref("point1", "First point the line passes through"),
                point_ref("point2", "Second point the line passes through"),
                ToolParameter(
                    name="equation",
                    type="string",
                    description="Line equation, e.g. 'y = 2x + 3' or '3x - 2y = 6'",
                    required=False,
                ),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_line_args(arguments)

    def synthesize(self, spec: LineSpec) -> SynthesizedCommand:
        return line_command(spec)
