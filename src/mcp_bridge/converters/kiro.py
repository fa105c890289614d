"""
Kiro CLI MCP format: .kiro/settings/mcp.json.

Kiro agents reference servers as ``@<name>`` tools and trust them with
``@<name>/*`` patterns, so a name containing '@' or '/' produces references
Kiro cannot resolve.
"""

from typing import List

from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo, McpServer

from ._mcp_servers import McpServersParser, McpServersWriter

KIRO_FORMAT = FormatInfo(
    name="kiro",
    display_name="Kiro CLI",
    default_path=".kiro/settings/mcp.json",
)

UNSAFE_NAME_CHARS = ("@", "/")


class KiroParser(McpServersParser):
    @property
    def format_info(self) -> FormatInfo:
        return KIRO_FORMAT


class KiroWriter(McpServersWriter):
    @property
    def format_info(self) -> FormatInfo:
        return KIRO_FORMAT

    def check_server(self, server: McpServer, errors: List[str], warnings: List[str]) -> None:
        if any(ch in (server.name or "") for ch in UNSAFE_NAME_CHARS):
            warnings.append(
                f"Server '{server.name}': names containing '@' or '/' break Kiro tool references"
            )


parser_registry.register(KiroParser)
writer_registry.register(KiroWriter)
