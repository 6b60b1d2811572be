import logging

from geogebra_tools.config.schema import EngineConfig
from geogebra_tools.config.secrets import Secrets
from geogebra_tools.engine.base import GeometryEngine
from geogebra_tools.engine.http_engine import HttpGeoGebraEngine
from geogebra_tools.engine.mock_engine import MockGeoGebraEngine

logger = logging.getLogger(__name__)


def create_engine(config: EngineConfig, secrets: Secrets | None = None) -> GeometryEngine:
    """Build the engine adapter selected by config.backend."""
    if config.backend == "mock":
        return MockGeoGebraEngine()
    if config.backend == "http":
        if secrets is not None and secrets.has_api_token():
            return HttpGeoGebraEngine(config, api_token=secrets.geogebra_api_token)
        logger.info(f"No GEOGEBRA_API_TOKEN set; talking to {config.base_url} unauthenticated")
        return HttpGeoGebraEngine(config)
    raise ValueError(f"Unknown engine backend: {config.backend!r} (expected 'http' or 'mock')")
