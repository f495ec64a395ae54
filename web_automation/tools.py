"""
Tool catalog advertised to MCP clients.
"""
from typing import Any, Dict, List, Type

from mcp.types import Tool

from .browser.operations import ARGUMENT_MODELS, ToolArgs


def input_schema(model: Type[ToolArgs]) -> Dict[str, Any]:
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.pop("description", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    return schema


def tool_definitions() -> List[Tool]:
    """One Tool per operation, in catalog order."""
    return [
        Tool(
            name=operation.value,
            description=(model.__doc__ or "").strip(),
            inputSchema=input_schema(model),
        )
        for operation, model in ARGUMENT_MODELS.items()
    ]
