"""
Agent formats. Importing this package registers every parser and writer.

- Cursor (.cursor/mcp.json)
- Roo Code (.roo/mcp.json)
- Windsurf (.windsurf/mcp_config.json)
- Kiro CLI (.kiro/settings/mcp.json)
- VS Code / Copilot (.vscode/mcp.json)
- OpenCode (opencode.json)
- Continue (.continue/config.yaml)
"""

from . import continue_dev, cursor, kiro, opencode, roocode, vscode, windsurf  # noqa: F401
