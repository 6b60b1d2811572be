import logging
import re
from typing import Any

from geogebra_tools.engine.base import EvalResult

logger = logging.getLogger(__name__)

_ASSIGNMENT = re.compile(r"[ ]*([A-Za-z][A-Za-z0-9_]*)[ ]*(?:=|:)")
_DELETE = re.compile(r"[ ]*Delete\([ ]*([A-Za-z][A-Za-z0-9_]*)[ ]*\)[ ]*")


class MockGeoGebraEngine:
    """In-memory engine that accepts every command and tracks created object names."""

    def __init__(self, fail_with: str | None = None) -> None:
        self._fail_with = fail_with
        self._ready = False
        self._objects: dict[str, str] = {}
        self.commands: list[str] = []

    async def initialize(self) -> None:
        self._ready = True
        logger.info("MockGeoGebraEngine started")

    async def cleanup(self) -> None:
        self._ready = False
        logger.info("MockGeoGebraEngine stopped")

    async def is_ready(self) -> bool:
        return self._ready

    async def eval_command(self, command: str) -> EvalResult:
        self.commands.append(command)
        if self._fail_with is not None:
            logger.info(f"MockEngine: rejecting '{command}'")
            return EvalResult(success=False, error=self._fail_with)

        deleted = _DELETE.fullmatch(command)
        if deleted:
            self._objects.pop(deleted.group(1), None)
        else:
            assigned = _ASSIGNMENT.match(command)
            if assigned:
                self._objects[assigned.group(1)] = command
        logger.info(f"MockEngine: would evaluate '{command}'")
        return EvalResult(success=True, result="success")

    async def get_state(self) -> dict[str, Any]:
        return {"ready": self._ready, "objects": list(self._objects)}

    async def get_all_object_names(self) -> list[str]:
        return list(self._objects)

    async def get_object_info(self, name: str) -> dict[str, Any]:
        if name not in self._objects:
            return {}
        return {"name": name, "definition": self._objects[name]}

    async def new_construction(self) -> None:
        self._objects.clear()

    async def set_coord_system(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        logger.info(f"MockEngine: coord system x=[{xmin}, {xmax}] y=[{ymin}, {ymax}]")

    async def set_axes_visible(self, x_axis: bool, y_axis: bool) -> None:
        logger.info(f"MockEngine: axes x={x_axis} y={y_axis}")

    async def set_grid_visible(self, visible: bool) -> None:
        logger.info(f"MockEngine: grid {visible}")

    async def export_png(self, scale: float = 1.0) -> str:
        return ""

    async def export_svg(self) -> str:
        return "<svg xmlns=\"http://www.w3.org/2000/svg\"/>"
