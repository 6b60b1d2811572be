from typing import Any

from geogebra_tools.geometry.commands import point_command
from geogebra_tools.geometry.specs import PointSpec, SynthesizedCommand
from geogebra_tools.geometry.validators import ValidationOutcome, validate_point_args
from geogebra_tools.tools.base import ToolDefinition, ToolParameter
from geogebra_tools.tools.builtin.params import NAME_PARAM


class CreatePointTool:
    """Create a free point at fixed coordinates."""

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_create_point",
            description="Create a point in GeoGebra at the given x and y coordinates.",
            parameters=(
                NAME_PARAM,
                ToolParameter(name="x", type="number", description="X coordinate of the point"),
                ToolParameter(name="y", type="number", description="Y coordinate of the point"),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_point_args(arguments)

    def synthesize(self, spec: PointSpec) -> SynthesizedCommand:
        return point_command(spec)
