from dataclasses import dataclass
from typing import Any, Protocol


class EngineError(Exception):
    pass


@dataclass(frozen=True)
class EvalResult:
    success: bool
    result: str | None = None
    error: str | None = None


class CommandExecutor(Protocol):
    """The only engine capability the tool registry depends on."""

    async def eval_command(self, command: str) -> EvalResult: ...


class GeometryEngine(CommandExecutor, Protocol):
    """Full GeoGebra instance surface used by the CLI and query tools."""

    async def is_ready(self) -> bool: ...
    async def initialize(self) -> None: ...
    async def cleanup(self) -> None: ...
    async def get_state(self) -> dict[str, Any]: ...
    async def get_all_object_names(self) -> list[str]: ...
    async def get_object_info(self, name: str) -> dict[str, Any]: ...
    async def new_construction(self) -> None: ...
    async def set_coord_system(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None: ...
    async def set_axes_visible(self, x_axis: bool, y_axis: bool) -> None: ...
    async def set_grid_visible(self, visible: bool) -> None: ...
    async def export_png(self, scale: float = 1.0) -> str: ...
    async def export_svg(self) -> str: ...
