"""
Cursor AI MCP format: .cursor/mcp.json.
"""

from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo

from ._mcp_servers import McpServersParser, McpServersWriter

CURSOR_FORMAT = FormatInfo(
    name="cursor",
    display_name="Cursor AI",
    default_path=".cursor/mcp.json",
    status="stable",
)


class CursorParser(McpServersParser):
    """Reads .cursor/mcp.json."""

    @property
    def format_info(self) -> FormatInfo:
        return CURSOR_FORMAT


class CursorWriter(McpServersWriter):
    """Writes .cursor/mcp.json."""

    @property
    def format_info(self) -> FormatInfo:
        return CURSOR_FORMAT


parser_registry.register(CursorParser)
writer_registry.register(CursorWriter)
