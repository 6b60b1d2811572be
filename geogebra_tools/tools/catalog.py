from geogebra_tools.engine.base import GeometryEngine
from geogebra_tools.tools.builtin.create_circle import CreateCircleTool
from geogebra_tools.tools.builtin.create_line import CreateLineTool
from geogebra_tools.tools.builtin.create_point import CreatePointTool
from geogebra_tools.tools.builtin.create_polygon import CreatePolygonTool
from geogebra_tools.tools.builtin.delete_object import DeleteObjectTool
from geogebra_tools.tools.builtin.eval_command import EvalCommandTool
from geogebra_tools.tools.builtin.get_object_info import GetObjectInfoTool
from geogebra_tools.tools.registry import ToolRegistry


def build_registry(engine: GeometryEngine) -> ToolRegistry:
    """Create the registry with every GeoGebra tool, in discovery order."""
    registry = ToolRegistry(engine)
    registry.register(CreatePointTool())
    registry.register(CreateLineTool())
    registry.register(CreateCircleTool())
    registry.register(CreatePolygonTool())
    registry.register(EvalCommandTool())
    registry.register(DeleteObjectTool())
    registry.register(GetObjectInfoTool(engine))
    return registry
