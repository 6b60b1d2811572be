from typing import Any

from geogebra_tools.geometry.commands import raw_command
from geogebra_tools.geometry.specs import RawCommandSpec, SynthesizedCommand
from geogebra_tools.geometry.validators import ValidationOutcome, validate_eval_args
from geogebra_tools.tools.base import ToolDefinition, ToolParameter


class EvalCommandTool:
    """Pass a GeoGebra command through unchanged."""

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_eval_command",
            description=(
                "Evaluate an arbitrary GeoGebra command, e.g. 'M = Midpoint(A, B)'. "
                "Prefer the dedicated construction tools when one fits."
            ),
            parameters=(
                ToolParameter(name="command", type="string", description="GeoGebra command to evaluate"),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_eval_args(arguments)

    def synthesize(self, spec: RawCommandSpec) -> SynthesizedCommand:
        return raw_command(spec)
