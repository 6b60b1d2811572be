import logging
from typing import Any

from geogebra_tools.engine.base import EngineError, GeometryEngine
from geogebra_tools.geometry.specs import ObjectQuerySpec
from geogebra_tools.geometry.validators import (
    NAME_PATTERN,
    ValidationOutcome,
    validate_object_query_args,
)
from geogebra_tools.tools.base import ToolDefinition, ToolParameter

logger = logging.getLogger(__name__)


class GetObjectInfoTool:
    """Read back the engine's description of one named object."""

    def __init__(self, engine: GeometryEngine) -> None:
        self._engine = engine

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="geogebra_get_object_info",
            description="Get the type, definition and value of an existing GeoGebra object.",
            parameters=(
                ToolParameter(
                    name="name",
                    type="string",
                    description="Name of the object to inspect",
                    pattern=NAME_PATTERN.pattern,
                ),
            ),
        )

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome:
        return validate_object_query_args(arguments)

    async def execute(self, spec: ObjectQuerySpec) -> dict[str, Any]:
        info = await self._engine.get_object_info(spec.name)
        if not info:
            raise EngineError(f"Object not found: {spec.name}")
        logger.debug(f"Object info for {spec.name}: {info}")
        return {"name": spec.name, "object": info}
