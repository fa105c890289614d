"""
OpenCode MCP format: the "mcp" section of opencode.json.

Structure:
    {
      "$schema": "https://opencode.ai/config.json",
      "mcp": {
        "<name>": {
          "type": "local",
          "command": ["npx", "-y", "server"],
          "environment": {"KEY": "value"},
          "enabled": true
        }
      }
    }

The command is an argv array: element 0 is the executable, the rest are args.
"""

from typing import Any, Dict, List

from mcp_bridge.core.parser import BaseParser, ParseError
from mcp_bridge.core.registry import parser_registry, writer_registry
from mcp_bridge.core.types import FormatInfo, McpConfig, McpServer
from mcp_bridge.core.writer import BaseWriter

from ._common import (
    extra_properties,
    read_args,
    read_env,
    require_entry,
    require_property,
    server_items,
    warn_unsupported,
)

OPENCODE_FORMAT = FormatInfo(
    name="opencode",
    display_name="OpenCode",
    default_path="opencode.json",
)

ROOT_KEY = "mcp"
SERVER_FIELDS = ("type", "command", "args", "environment", "env", "enabled")


def _split_command(name: str, entry: Dict[str, Any], warnings: List[str]):
    if "command" not in entry:
        raise ParseError(f"Server '{name}' is missing required field 'command'")

    command = entry["command"]
    if isinstance(command, str):
        # Older configs: string command + separate args
        return command, read_args(name, entry.get("args"), warnings)
    if isinstance(command, list):
        if entry.get("args"):
            warnings.append(f"Server '{name}': 'args' is ignored when 'command' is a list")
        argv = read_args(name, command, warnings, key="command")
        if not argv:
            return "", []
        return argv[0], argv[1:]
    if command is None:
        return "", []
    raise ParseError(f"Server '{name}' field 'command' must be a list or a string")


class OpenCodeParser(BaseParser):
    @property
    def format_info(self) -> FormatInfo:
        return OPENCODE_FORMAT

    def parse_document(self, document: Any, warnings: List[str]) -> McpConfig:
        servers = require_property(document, ROOT_KEY)
        config = McpConfig()

        for name, raw in server_items(servers):
            entry = require_entry(name, raw)
            command, args = _split_command(name, entry, warnings)
            warn_unsupported(name, entry, SERVER_FIELDS, warnings)

            if entry.get("enabled") is False:
                warnings.append(f"Server '{name}' is disabled; the disabled flag is not carried over")

            env_key = "environment" if "environment" in entry else "env"
            config.servers.append(
                McpServer(
                    name=name,
                    command=command,
                    args=args,
                    env=read_env(name, entry.get(env_key), warnings, key=env_key),
                )
            )

        extras = extra_properties(document, ROOT_KEY)
        if extras:
            config.metadata[self.agent_name] = extras
        return config


class OpenCodeWriter(BaseWriter):
    @property
    def format_info(self) -> FormatInfo:
        return OPENCODE_FORMAT

    def check_server(self, server: McpServer, errors: List[str], warnings: List[str]) -> None:
        command = (server.command or "").strip()
        if command and len(command.split()) > 1:
            warnings.append(
                f"Server '{server.name}': command '{command}' contains whitespace; "
                "OpenCode runs the command array without a shell"
            )

    def build_document(self, config: McpConfig) -> Dict[str, Any]:
        servers = {}
        for server in config.servers:
            entry: Dict[str, Any] = {
                "type": "local",
                "command": [server.command] + list(server.args or []),
            }
            if server.env:
                entry["environment"] = dict(server.env)
            entry["enabled"] = True
            servers[server.name] = entry

        document: Dict[str, Any] = {}
        extras = config.metadata.get(self.agent_name, {})
        if "$schema" in extras:
            document["$schema"] = extras["$schema"]
        document[ROOT_KEY] = servers
        for key, value in extras.items():
            document.setdefault(key, value)
        return document


parser_registry.register(OpenCodeParser)
writer_registry.register(OpenCodeWriter)
