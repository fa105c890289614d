"""Shared fixtures for MCP Bridge tests."""

import json
from pathlib import Path

import pytest

from mcp_bridge.core import McpConfig, McpServer, build_engine

SCENARIO = {"mcpServers": {"fs": {"command": "npx", "args": ["-y", "server-fs"], "env": {}}}}


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def engine():
    return build_engine()


@pytest.fixture
def roocode_file(tmp_path: Path) -> Path:
    """The one-server roocode config used throughout the tests."""
    return write_json(tmp_path / ".roo" / "mcp.json", SCENARIO)


@pytest.fixture
def sample_config() -> McpConfig:
    return McpConfig(
        servers=[
            McpServer(name="fs", command="npx", args=["-y", "server-fs"]),
            McpServer(name="github", command="docker", args=["run", "-i", "gh"], env={"GITHUB_TOKEN": "x"}),
            McpServer(name="memory", command="uvx", args=[], env={}),
        ]
    )
