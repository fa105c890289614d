"""
Continue MCP format: .continue/config.yaml (YAML, servers as a list).

Structure:
    name: MCP servers
    version: 0.0.1
    schema: v1
    mcpServers:
      - name: fs
        command: npx
        args: ["-y", "server-fs"]
        env:
          KEY: value

Servers are list items, so the name is an ordinary field here. A missing name
parses as "" and is left for the validator to reject.
"""

from typing import Any, Dict, List

from mcp_bridge.core.parser import BaseParser, ParseError
from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo, McpConfig, McpServer
from mcp_bridge.core.writer import BaseWriter

from ._common import (
    command_entry,
    extra_properties,
    read_args,
    read_env,
    require_command,
    require_property,
    warn_unsupported,
)

CONTINUE_FORMAT = FormatInfo(
    name="continue",
    display_name="Continue",
    default_path=".continue/config.yaml",
    serialization="yaml",
)

ROOT_KEY = "mcpServers"
SERVER_FIELDS = ("name", "command", "args", "env")
HEADER_DEFAULTS = {"name": "MCP servers", "version": "0.0.1", "schema": "v1"}


class ContinueParser(BaseParser):
    @property
    def format_info(self) -> FormatInfo:
        return CONTINUE_FORMAT

    def parse_document(self, document: Any, warnings: List[str]) -> McpConfig:
        items = require_property(document, ROOT_KEY, list)
        config = McpConfig()

        for i, item in enumerate(items):
            if not isinstance(item, dict):
                raise ParseError(f"Server at index {i} must be an object")
            name = item.get("name")
            if name is None:
                name = ""
            elif not isinstance(name, str):
                warnings.append(f"Server at index {i}: 'name' is not a string and was ignored")
                name = ""

            command = require_command(name, item)
            warn_unsupported(name, item, SERVER_FIELDS, warnings)
            config.servers.append(
                McpServer(
                    name=name,
                    command=command,
                    args=read_args(name, item.get("args"), warnings),
                    env=read_env(name, item.get("env"), warnings),
                )
            )

        extras = extra_properties(document, ROOT_KEY)
        if extras:
            config.metadata[self.agent_name] = extras
        return config


class ContinueWriter(BaseWriter):
    @property
    def format_info(self) -> FormatInfo:
        return CONTINUE_FORMAT

    def build_document(self, config: McpConfig) -> Dict[str, Any]:
        document: Dict[str, Any] = dict(HEADER_DEFAULTS)
        document.update(
            (k, v) for k, v in config.metadata.get(self.agent_name, {}).items() if k != ROOT_KEY
        )
        document[ROOT_KEY] = [
            {"name": server.name, **command_entry(server)} for server in config.servers
        ]
        return document


parser_registry.register(ContinueParser)
writer_registry.register(ContinueWriter)
