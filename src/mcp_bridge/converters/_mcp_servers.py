"""
The ``{"mcpServers": {name: {command, args, env}}}`` family.

Cursor, Roo Code, Windsurf and Kiro all read this shape; they differ only in
where the file lives and which extra per-server flags they accept.
"""

from typing import Any, Dict, List

from mcp_bridge.core.parser import BaseParser
from mcp_bridge.core.types import McpConfig, McpServer
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

ROOT_KEY = "mcpServers"
SERVER_FIELDS = ("command", "args", "env")


class McpServersParser(BaseParser):
    root_key = ROOT_KEY

    def parse_document(self, document: Any, warnings: List[str]) -> McpConfig:
        servers = require_property(document, self.root_key)
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

        extras = extra_properties(document, self.root_key)
        if extras:
            config.metadata[self.agent_name] = extras
        return config


class McpServersWriter(BaseWriter):
    root_key = ROOT_KEY

    def build_document(self, config: McpConfig) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            self.root_key: {s.name: command_entry(s) for s in config.servers}
        }
        # Top-level keys captured from a file of this same agent.
        for key, value in config.metadata.get(self.agent_name, {}).items():
            document.setdefault(key, value)
        return document
