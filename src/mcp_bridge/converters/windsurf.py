"""
Windsurf MCP format: same mcpServers shape, kept in the project's .windsurf/.
"""

from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo

from ._mcp_servers import McpServersParser, McpServersWriter

WINDSURF_FORMAT = FormatInfo(
    name="windsurf",
    display_name="Windsurf",
    default_path=".windsurf/mcp_config.json",
)


class WindsurfParser(McpServersParser):
    @property
    def format_info(self) -> FormatInfo:
        return WINDSURF_FORMAT


class WindsurfWriter(McpServersWriter):
    @property
    def format_info(self) -> FormatInfo:
        return WINDSURF_FORMAT


parser_registry.register(WindsurfParser)
writer_registry.register(WindsurfWriter)
