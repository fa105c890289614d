"""
MCP Bridge - MCP server config converter for AI coding agents.

Converts MCP server declarations between:
- Cursor (.cursor/mcp.json)
- Roo Code (.roo/mcp.json)
- Windsurf (.windsurf/mcp_config.json)
- Kiro CLI (.kiro/settings/mcp.json)
- VS Code / Copilot (.vscode/mcp.json)
- OpenCode (opencode.json)
- Continue (.continue/config.yaml)
"""

__version__ = "0.1.0"

# Trigger converter auto-registration on import
from mcp_bridge import converters  # noqa: F401

__all__ = [
    "cli",
    "converters",
    "core",
    "services",
    "tui",
    "utils",
]
