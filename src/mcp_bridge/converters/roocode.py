"""
Roo Code MCP format: .roo/mcp.json (project) or mcp_settings.json (global).
"""

from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo

from ._mcp_servers import McpServersParser, McpServersWriter

ROOCODE_FORMAT = FormatInfo(
    name="roocode",
    display_name="Roo Code",
    default_path=".roo/mcp.json",
    status="stable",
)


class RooCodeParser(McpServersParser):
    @property
    def format_info(self) -> FormatInfo:
        return ROOCODE_FORMAT


class RooCodeWriter(McpServersWriter):
    @property
    def format_info(self) -> FormatInfo:
        return ROOCODE_FORMAT


parser_registry.register(RooCodeParser)
writer_registry.register(RooCodeWriter)
