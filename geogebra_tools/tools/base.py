import json
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from geogebra_tools.geometry.specs import SynthesizedCommand
from geogebra_tools.geometry.validators import ValidationOutcome


@dataclass(frozen=True)
class ToolParameter:
    name: str
    type: str
    description: str
    required: bool = True
    enum: list[str] | None = None
    items: dict[str, Any] | None = None
    minimum: float | None = None
    exclusive_minimum: float | None = None
    min_items: int | None = None
    pattern: str | None = None

    def to_schema(self) -> dict[str, Any]:
        """JSON-Schema property for this parameter."""
        prop: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum:
            prop["enum"] = list(self.enum)
        if self.items is not None:
            prop["items"] = dict(self.items)
        if self.minimum is not None:
            prop["minimum"] = self.minimum
        if self.exclusive_minimum is not None:
            prop["exclusiveMinimum"] = self.exclusive_minimum
        if self.min_items is not None:
            prop["minItems"] = self.min_items
        if self.pattern is not None:
            prop["pattern"] = self.pattern
        return prop


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_dict(self) -> dict[str, Any]:
        """Tool description in the MCP tools/list format."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass(frozen=True)
class ToolResult:
    """Uniform envelope returned by every tool call."""

    content: list[dict[str, str]]
    is_error: bool = False

    @classmethod
    def success(cls, payload: dict[str, Any]) -> "ToolResult":
        body = {"success": True, **payload}
        return cls(content=[{"type": "text", "text": json.dumps(body)}], is_error=False)

    @classmethod
    def failure(cls, error: str) -> "ToolResult":
        body = {"success": False, "error": error}
        return cls(content=[{"type": "text", "text": json.dumps(body)}], is_error=True)

    @property
    def payload(self) -> dict[str, Any]:
        return json.loads(self.content[0]["text"])

    def to_dict(self) -> dict[str, Any]:
        return {"content": [dict(c) for c in self.content], "isError": self.is_error}


@runtime_checkable
class CommandTool(Protocol):
    """A tool whose valid arguments become one engine command."""

    @property
    def definition(self) -> ToolDefinition: ...

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome: ...

    def synthesize(self, spec: Any) -> SynthesizedCommand: ...


@runtime_checkable
class QueryTool(Protocol):
    """A tool that reads engine state instead of sending a command."""

    @property
    def definition(self) -> ToolDefinition: ...

    def validate(self, arguments: dict[str, Any]) -> ValidationOutcome: ...

    async def execute(self, spec: Any) -> dict[str, Any]: ...


Tool = CommandTool | QueryTool
