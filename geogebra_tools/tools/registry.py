import logging
from typing import Any

from geogebra_tools.core.state import TERMINAL_STATES, CallState, validate_transition
from geogebra_tools.engine.base import CommandExecutor, EngineError
from geogebra_tools.tools.base import CommandTool, QueryTool, Tool, ToolDefinition, ToolResult

logger = logging.getLogger(__name__)


class _Call:
    """Tracks one execute_tool invocation through its lifecycle."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        self.state = CallState.RECEIVED

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, target: CallState) -> None:
        if self.finished:
            raise ValueError(f"Tool call '{self.tool_name}' already finished in state {self.state.name}")
        validate_transition(self.state, target)
        logger.debug(f"Tool '{self.tool_name}': {self.state.name} -> {target.name}")
        self.state = target


class ToolRegistry:
    """Registry of GeoGebra tools: validation, command synthesis and dispatch."""

    def __init__(self, executor: CommandExecutor) -> None:
        self._executor = executor
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool. Raises ValueError if name already taken."""
        name = tool.definition.name
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        if not isinstance(tool, (CommandTool, QueryTool)):
            raise TypeError(f"Tool {name} must provide synthesize() or execute()")
        self._tools[name] = tool
        logger.info(f"Registered tool: {name}")

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def get_tools(self) -> list[ToolDefinition]:
        return [t.definition for t in self._tools.values()]

    def to_mcp_tools(self) -> list[dict[str, Any]]:
        """All tools in the MCP tools/list format."""
        return [defn.to_dict() for defn in self.get_tools()]

    async def execute_tool(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Execute a tool by name. Every outcome is returned as a ToolResult."""
        call = _Call(name)
        tool = self.get(name)
        if tool is None:
            call.advance(CallState.REJECTED)
            available = list(self._tools.keys())
            logger.warning(f"Unknown tool '{name}' requested")
            return ToolResult.failure(f"Unknown tool: {name}. Available tools: {available}")

        call.advance(CallState.VALIDATING)
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            call.advance(CallState.REJECTED)
            return ToolResult.failure("Invalid arguments: expected an object")
        outcome = tool.validate(arguments)
        if not outcome.ok:
            call.advance(CallState.REJECTED)
            logger.info(f"Tool '{name}' rejected ({outcome.category.value}): {outcome.reason}")
            return ToolResult.failure(outcome.reason)

        if isinstance(tool, CommandTool):
            return await self._dispatch(call, tool, outcome.value)
        return await self._query(call, tool, outcome.value)

    async def _dispatch(self, call: _Call, tool: CommandTool, spec: Any) -> ToolResult:
        call.advance(CallState.SYNTHESIZING)
        synthesized = tool.synthesize(spec)

        call.advance(CallState.DISPATCHING)
        logger.info(f"Tool '{call.tool_name}' sending command: {synthesized.command}")
        try:
            result = await self._executor.eval_command(synthesized.command)
        except EngineError as e:
            call.advance(CallState.FAILED)
            logger.error(f"Engine error for '{synthesized.command}': {e}")
            return ToolResult.failure(str(e))
        except Exception as e:
            call.advance(CallState.FAILED)
            logger.exception(f"Tool '{call.tool_name}' raised unexpected error")
            return ToolResult.failure(f"Error executing tool '{call.tool_name}': {e}")

        if not result.success:
            call.advance(CallState.FAILED)
            logger.info(f"Engine rejected '{synthesized.command}': {result.error}")
            return ToolResult.failure(result.error or "Command failed")

        call.advance(CallState.COMPLETED)
        payload: dict[str, Any] = {"command": synthesized.command, **synthesized.metadata}
        if result.result:
            payload["result"] = result.result
        return ToolResult.success(payload)

    async def _query(self, call: _Call, tool: QueryTool, spec: Any) -> ToolResult:
        call.advance(CallState.DISPATCHING)
        try:
            payload = await tool.execute(spec)
        except EngineError as e:
            call.advance(CallState.FAILED)
            logger.error(f"Engine error in '{call.tool_name}': {e}")
            return ToolResult.failure(str(e))
        except Exception as e:
            call.advance(CallState.FAILED)
            logger.exception(f"Tool '{call.tool_name}' raised unexpected error")
            return ToolResult.failure(f"Error executing tool '{call.tool_name}': {e}")

        call.advance(CallState.COMPLETED)
        return ToolResult.success(payload)
