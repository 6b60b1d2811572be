from geogebra_tools.geometry.validators import NAME_PATTERN
from geogebra_tools.tools.base import ToolParameter

NAME_PARAM = ToolParameter(
    name="name",
    type="string",
    description="Name of the new object (must start with a letter, e.g. 'A', 'c1')",
    pattern=NAME_PATTERN.pattern,
)


def point_ref(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(
        name=name,
        type="string",
        description=description,
        required=required,
        pattern=NAME_PATTERN.pattern,
    )
