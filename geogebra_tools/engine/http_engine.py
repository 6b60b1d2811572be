import logging
from typing import Any

import httpx

from geogebra_tools.config.schema import EngineConfig
from geogebra_tools.engine.base import EngineError, EvalResult

logger = logging.getLogger(__name__)


class HttpGeoGebraEngine:
    """
    GeoGebra instance reached through a JSON bridge that hosts the applet
    (for example a headless browser running the GeoGebra web app).
    """

    def __init__(
        self,
        config: EngineConfig,
        api_token: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._api_token = api_token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        if self._client is not None:
            return
        headers = {"Accept": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
            headers=headers,
            transport=self._transport,
        )
        logger.info(f"GeoGebra engine client created for {self._config.base_url}")

    async def cleanup(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("GeoGebra engine client closed")

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            await self.initialize()
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        client = await self._ensure_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise EngineError(f"GeoGebra bridge unreachable: {e}") from e

        if not response.is_success:
            raise EngineError(
                f"GeoGebra bridge returned status {response.status_code} for {method} {path}"
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise EngineError(f"GeoGebra bridge sent invalid JSON for {method} {path}") from e

    async def eval_command(self, command: str) -> EvalResult:
        logger.debug(f"Evaluating command: {command}")
        client = await self._ensure_client()
        try:
            response = await client.post("/eval", json={"command": command})
        except httpx.RequestError as e:
            raise EngineError(f"GeoGebra bridge unreachable: {e}") from e

        # The bridge answers 422 when GeoGebra rejects the command itself
        if response.status_code == 422:
            data = _json_or_empty(response)
            return EvalResult(success=False, error=data.get("error") or "Command rejected")
        if not response.is_success:
            raise EngineError(f"GeoGebra bridge returned status {response.status_code} for /eval")

        data = _json_or_empty(response)
        if not data.get("success", False):
            return EvalResult(success=False, error=data.get("error") or "Command failed")
        return EvalResult(success=True, result=data.get("result"))

    async def is_ready(self) -> bool:
        try:
            data = await self._request("GET", "/health")
        except EngineError:
            logger.warning("GeoGebra health check failed", exc_info=True)
            return False
        return bool(data and data.get("ready"))

    async def get_state(self) -> dict[str, Any]:
        return await self._request("GET", "/state") or {}

    async def get_all_object_names(self) -> list[str]:
        data = await self._request("GET", "/objects") or {}
        return list(data.get("names", []))

    async def get_object_info(self, name: str) -> dict[str, Any]:
        return await self._request("GET", f"/objects/{name}") or {}

    async def new_construction(self) -> None:
        await self._request("POST", "/construction/new")

    async def set_coord_system(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        await self._request(
            "POST", "/view/coords", json={"xmin": xmin, "xmax": xmax, "ymin": ymin, "ymax": ymax}
        )

    async def set_axes_visible(self, x_axis: bool, y_axis: bool) -> None:
        await self._request("POST", "/view/axes", json={"x": x_axis, "y": y_axis})

    async def set_grid_visible(self, visible: bool) -> None:
        await self._request("POST", "/view/grid", json={"visible": visible})

    async def export_png(self, scale: float = 1.0) -> str:
        data = await self._request("GET", "/export/png", params={"scale": scale}) or {}
        return data.get("data", "")

    async def export_svg(self) -> str:
        data = await self._request("GET", "/export/svg") or {}
        return data.get("data", "")


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
