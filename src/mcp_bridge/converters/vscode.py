"""
VS Code / GitHub Copilot MCP format: .vscode/mcp.json.

Structure:
    {
      "servers": {"<name>": {"type": "stdio", "command": ..., "args": [...], "env": {...}}},
      "inputs": [...]
    }

Only stdio servers carry a command; http/sse entries have a "url" instead and
fail the parse the same way any entry without a command does.
"""

from typing import Any, Dict, List

from mcp_bridge.core.parser import BaseParser
from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo, McpConfig, McpServer
from mcp_bridge.core.writer import BaseWriter

from ._common import (
    command_entry,
    extra_properties,
    read_args,
    read_env,
    require_command,
    require_entry,
    require_property,
    server_items,
    warn_unsupported,
)

VSCODE_FORMAT = FormatInfo(
    name="vscode",
    display_name="VS Code (Copilot)",
    default_path=".vscode/mcp.json",
)

ROOT_KEY = "servers"
SERVER_FIELDS = ("type", "command", "args", "env")


class VSCodeParser(BaseParser):
    @property
    def format_info(self) -> FormatInfo:
        return VSCODE_FORMAT

    def parse_document(self, document: Any, warnings: List[str]) -> McpConfig:
        servers = require_property(document, ROOT_KEY)
        config = McpConfig()

        for name, raw in server_items(servers):
            entry = require_entry(name, raw)
            command = require_command(name, entry)
            warn_unsupported(name, entry, SERVER_FIELDS, warnings)
            config.servers.append(
                McpServer(
                    name=name,
                    command=command,
                    args=read_args(name, entry.get("args"), warnings),
                    env=read_env(name, entry.get("env"), warnings),
                )
            )

        extras = extra_properties(document, ROOT_KEY)
        if extras:
            config.metadata[self.agent_name] = extras
        return config


class VSCodeWriter(BaseWriter):
    @property
    def format_info(self) -> FormatInfo:
        return VSCODE_FORMAT

    def build_document(self, config: McpConfig) -> Dict[str, Any]:
        servers = {}
        for server in config.servers:
            servers[server.name] = {"type": "stdio", **command_entry(server)}

        document: Dict[str, Any] = {ROOT_KEY: servers}
        for key, value in config.metadata.get(self.agent_name, {}).items():
            document.setdefault(key, value)
        return document


parser_registry.register(VSCodeParser)
writer_registry.register(VSCodeWriter)
