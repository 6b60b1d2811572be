import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from geogebra_tools.config.loader import load_config
from geogebra_tools.config.secrets import load_secrets
from geogebra_tools.engine.factory import create_engine
from geogebra_tools.tools.catalog import build_registry
from geogebra_tools.util.logging import setup_logging

logger = logging.getLogger(__name__)


async def run(args: argparse.Namespace) -> int:
    config = load_config()
    setup_logging(config.logging)

    engine_config = config.engine
    if args.mock:
        engine_config = replace(engine_config, backend="mock")
    engine = create_engine(engine_config, load_secrets())
    registry = build_registry(engine)

    if args.list_tools:
        print(json.dumps({"tools": registry.to_mcp_tools()}, indent=2))
        return 0

    logger.info(f"Starting GeoGebra tools ({engine_config.backend} engine)")
    await engine.initialize()
    try:
        if args.status:
            ready = await engine.is_ready()
            names = await engine.get_all_object_names() if ready else []
            print(json.dumps({"ready": ready, "objects": names}, indent=2))
            return 0 if ready else 1

        if args.call:
            try:
                arguments = json.loads(args.args) if args.args else {}
            except json.JSONDecodeError as e:
                logger.error(f"--args is not valid JSON: {e}")
                return 2
            result = await registry.execute_tool(args.call, arguments)
            print(json.dumps(result.to_dict(), indent=2))
            return 1 if result.is_error else 0
    finally:
        await engine.cleanup()

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="GeoGebra construction tools")
    parser.add_argument("--list-tools", action="store_true", help="Print the tool catalog as JSON")
    parser.add_argument("--call", action="store", help="Name of a tool to execute")
    parser.add_argument("--args", action="store", help="JSON object of tool arguments for --call")
    parser.add_argument("--status", action="store_true", help="Report engine readiness and objects")
    parser.add_argument("--mock", action="store_true", help="Use the in-memory engine")
    args = parser.parse_args()
    if not (args.list_tools or args.call or args.status):
        parser.error("one of --list-tools, --call or --status is required")
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
