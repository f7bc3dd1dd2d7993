from typing import Any

import jsonschema
import mcp.types as types
from jsonschema import ValidationError
from pydantic import BaseModel

from querytrack.core.errors import UnknownToolError, ValidationFailure
from querytrack.service import QueryTrackService
from querytrack.utils.logger import setup_logger

from .definitions import LOG_QUERY, SHOW_DASHBOARD, TOOLS, ToolDefinition

logger = setup_logger(__name__)


class ToolResult(BaseModel):
    """Text content returned to the caller of a tool."""

    text: str

    def to_content(self) -> list[types.TextContent]:
        return [types.TextContent(type="text", text=self.text)]


class ToolDispatcher:
    """Route named tool calls to the service after validating their arguments."""

    def __init__(self, service: QueryTrackService):
        self.service = service
        self._tools: dict[str, ToolDefinition] = {tool.name: tool for tool in TOOLS}

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(f"Unknown tool: {name}")

        if arguments is None:
            arguments = {}
        self._validate(tool, arguments)
        logger.debug(f"Calling tool {name}")

        if name == LOG_QUERY:
            text = self.service.log(
                model=arguments.get("model"),
                query_summary=arguments.get("query_summary"),
                category=arguments.get("category"),
                notes=arguments.get("notes"),
            )
        elif name == SHOW_DASHBOARD:
            text = self.service.render()
        else:
            raise UnknownToolError(f"Unknown tool: {name}")

        return ToolResult(text=text)

    @staticmethod
    def _validate(tool: ToolDefinition, arguments: dict[str, Any]) -> None:
        if not isinstance(arguments, dict):
            raise ValidationFailure(f"Arguments for {tool.name} must be an object")
        try:
            jsonschema.validate(instance=arguments, schema=tool.input_schema)
        except ValidationError as e:
            error_path = ".".join(str(p) for p in e.path) if e.path else "arguments"
            raise ValidationFailure(f"Invalid {error_path} for {tool.name}: {e.message}") from e
