from typing import Any

from geogebra_tools.geometry.commands import delete_command
from geogebra_tools.geometry.specs import DeleteSpec, SynthesizedCommand
from geogebra_tools.geometry.validators import NAME_PATTERN, ValidationOutcome, validate_delete_args
from geogebra_tools.tools.base import ToolDefinition, ToolParameter


class DeleteObjectTool:
    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_delete_object",
            description="Delete an object (and everything that depends on it) from the construction.",
            parameters=(
                ToolParameter(
                    name="name",
                    type="string",
                    description="Name of the object to delete",
                    pattern=NAME_PATTERN.pattern,
                ),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_delete_args(arguments)

    def synthesize(self, spec: DeleteSpec) -> SynthesizedCommand:
        return delete_command(spec)
