from typing import Any

from geogebra_tools.geometry.commands import polygon_command
from geogebra_tools.geometry.specs import PolygonSpec, SynthesizedCommand
from geogebra_tools.geometry.validators import (
    MIN_POLYGON_VERTICES,
    NAME_PATTERN,
    ValidationOutcome,
    validate_polygon_args,
)
from geogebra_tools.tools.base import ToolDefinition, ToolParameter
from geogebra_tools.tools.builtin.params import NAME_PARAM


class CreatePolygonTool:
    """Create a polygon from an ordered list of existing points."""

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_create_polygon",
            description=(
                "Create a polygon in GeoGebra from an ordered list of vertices "
                f"(names of existing points, at least {MIN_POLYGON_VERTICES})."
            ),
            parameters=(
                NAME_PARAM,
                ToolParameter(
                    name="vertices",
                    type="array",
                    description="Ordered point names, e.g. ['A', 'B', 'C']",
                    items={"type": "string", "pattern": NAME_PATTERN.pattern},
                    min_items=MIN_POLYGON_VERTICES,
                ),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_polygon_args(arguments)

    def synthesize(self, spec: PolygonSpec) -> SynthesizedCommand:
        return polygon_command(spec)
