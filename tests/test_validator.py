"""Tests for the agent-agnostic ConfigValidator."""

import pytest

from mcp_bridge.core import ConfigValidator, McpConfig, McpServer


def _validate(config):
    return ConfigValidator().validate(config)


def test_valid_config_has_no_errors_or_warnings(sample_config):
    result = _validate(sample_config)
    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_none_config_short_circuits():
    result = _validate(None)
    assert not result.valid
    assert result.errors == ["Configuration cannot be null"]


def test_none_servers_short_circuits_even_with_blank_version():
    result = _validate(McpConfig(version="", servers=None))
    assert not result.valid
    assert result.errors == ["Servers list cannot be null"]
    assert result.warnings == []


@pytest.mark.parametrize("version", ["", "   ", None])
def test_blank_version_is_only_a_warning(version):
    config = McpConfig(version=version, servers=[McpServer(name="a", command="x")])
    result = _validate(config)
    assert result.valid
    assert result.warnings == ["Configuration version is not specified"]


def test_empty_servers_mentions_at_least_one_server():
    result = _validate(McpConfig(servers=[]))
    assert not result.valid
    assert any("at least one server" in e for e in result.errors)


def test_per_server_errors_are_accumulated():
    config = McpConfig(
        servers=[
            McpServer(name="", command="x"),
            McpServer(name="b", command="  "),
            McpServer(name="c", command="y", args=None, env=None),
        ]
    )
    result = _validate(config)
    assert not result.valid
    assert result.errors == [
        "Server at index 0 has no name",
        "Server 'b' (index 1) has no command",
        "Server 'c' has null Args list",
        "Server 'c' has null Env dictionary",
    ]


def test_duplicate_names_reported_once_with_all_names():
    config = McpConfig(
        servers=[
            McpServer(name="a", command="x"),
            McpServer(name="b", command="x"),
            McpServer(name="a", command="y"),
            McpServer(name="b", command="y"),
            McpServer(name="c", command="z"),
        ]
    )
    result = _validate(config)
    assert not result.valid
    assert result.errors == ["Duplicate server names found: a, b"]


def test_duplicate_names_are_case_sensitive():
    config = McpConfig(servers=[McpServer(name="fs", command="x"), McpServer(name="FS", command="x")])
    assert _validate(config).valid


def test_invalid_result_carries_no_warnings():
    config = McpConfig(version="", servers=[McpServer(name="", command="")])
    result = _validate(config)
    assert not result.valid
    assert result.warnings == []
    assert len(result.errors) == 2
