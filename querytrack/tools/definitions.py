from typing import Any

import mcp.types as types
from pydantic import BaseModel

LOG_QUERY = "log_query"
SHOW_DASHBOARD = "show_dashboard"

SUGGESTED_CATEGORIES = [
    "coding",
    "refactoring",
    "testing",
    "debugging",
    "data-analysis",
    "research",
    "documentation",
    "configuration",
    "clarification",
    "selection",
    "navigation",
    "conversation",
]


class ToolDefinition(BaseModel):
    """A tool advertised to callers, with the JSON schema of its arguments."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


TOOLS = [
    ToolDefinition(
        name=LOG_QUERY,
        description=(
            "Log an LLM query to the query tracking file with timestamp, model, category, and notes"
        ),
        input_schema={
            "type": "object",
            "properties": {
                "model": {
                    "type": "string",
                    "description": "The LLM model being queried (e.g., 'Claude', 'ChatGPT', 'Gemini')",
                },
                "query_summary": {
                    "type": "string",
                    "description": "A brief summary of what you're asking the model",
                },
                "category": {
                    "type": "string",
                    "description": "Optional category for the query. Use specific categories: "
                    + ", ".join(f"'{c}'" for c in SUGGESTED_CATEGORIES),
                },
                "notes": {
                    "type": "string",
                    "description": "Optional additional notes about the query",
                },
            },
            "required": ["model", "query_summary"],
        },
    ),
    ToolDefinition(
        name=SHOW_DASHBOARD,
        description=(
            "Generate and display an HTML dashboard with analytics from the query log, including "
            "KPI cards (Total Queries Today, Average Queries Per Day, Total Categories, Max Queries "
            "in a Day) and charts (Categories by Percent, Models by Percent, Queries by Day)"
        ),
        input_schema={"type": "object", "properties": {}, "required": []},
    ),
]
