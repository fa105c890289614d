"""Tests for ConversionEngine orchestration and the agent registries."""

import json
from pathlib import Path
from typing import Any, List

import pytest

from mcp_bridge.converters.cursor import CursorParser, CursorWriter
from mcp_bridge.converters.opencode import OpenCodeWriter
from mcp_bridge.converters.roocode import RooCodeParser, RooCodeWriter
from mcp_bridge.core import (
    AgentRegistry,
    ConfigValidator,
    ConversionEngine,
    FormatInfo,
    McpConfig,
    ValidationResult,
)
from mcp_bridge.core.parser import BaseParser
from mcp_bridge.services.convert_service import run_validate
from tests.conftest import SCENARIO, read_json, write_json


# =============================================================================
# LOOKUP
# =============================================================================


def test_list_agents_sorted(engine):
    sources = engine.list_source_agents()
    targets = engine.list_target_agents()
    assert sources == sorted(sources)
    assert targets == sorted(targets)
    assert {"cursor", "roocode"} <= set(sources)
    assert {"cursor", "roocode"} <= set(targets)


def test_unknown_source_lists_agents_and_writes_nothing(engine, roocode_file, tmp_path):
    out = tmp_path / "out" / "mcp.json"
    result = engine.convert("unknown", "roocode", roocode_file, out)

    assert not result.success
    assert result.config is None
    assert result.errors[0] == "No parser found for agent 'unknown'"
    assert result.errors[1] == "Available source agents: " + ", ".join(engine.list_source_agents())
    assert not out.exists()
    assert not out.parent.exists()


def test_unknown_target_lists_agents(engine, roocode_file, tmp_path):
    result = engine.convert("roocode", "nope", roocode_file, tmp_path / "x.json")
    assert not result.success
    assert result.errors == [
        "No writer found for agent 'nope'",
        "Available target agents: " + ", ".join(engine.list_target_agents()),
    ]


def test_agent_lookup_is_case_insensitive(engine, roocode_file, tmp_path):
    lower = engine.convert("roocode", "cursor", roocode_file, tmp_path / "a.json")
    mixed = engine.convert("RooCode", "CURSOR", roocode_file, tmp_path / "b.json")

    assert lower.success and mixed.success
    assert lower.errors == mixed.errors
    assert lower.warnings == mixed.warnings
    assert (tmp_path / "a.json").read_text() == (tmp_path / "b.json").read_text()


def test_compat_error_message_uses_writer_name(tmp_path):
    class StrictWriter(CursorWriter):
        def check_server(self, server, errors, warnings):
            errors.append(f"Server '{server.name}' rejected")

    engine = ConversionEngine([RooCodeParser()], [StrictWriter()])
    src = write_json(tmp_path / "in.json", SCENARIO)
    out = tmp_path / "out.json"

    result = engine.convert("roocode", "Cursor", src, out)
    assert not result.success
    assert result.errors == [
        "Configuration is not compatible with cursor format",
        "Server 'fs' rejected",
    ]
    assert not out.exists()


# =============================================================================
# SCENARIOS
# =============================================================================


def test_roocode_to_cursor_scenario(engine, roocode_file, tmp_path):
    out = tmp_path / ".cursor" / "mcp.json"
    result = engine.convert("roocode", "cursor", roocode_file, out)

    assert result.success
    assert result.errors == []
    assert result.warnings == []
    server = result.config.servers[0]
    assert (server.name, server.command, server.args, server.env) == ("fs", "npx", ["-y", "server-fs"], {})
    assert read_json(out) == {"mcpServers": {"fs": {"command": "npx", "args": ["-y", "server-fs"]}}}


def test_parse_failure_is_returned_verbatim(engine, tmp_path):
    src = write_json(tmp_path / "in.json", {"mcpServers": {"broken": {"args": []}}})
    out = tmp_path / "out.json"

    direct = RooCodeParser().parse(src)
    result = engine.convert("roocode", "cursor", src, out)

    assert result == direct
    assert not out.exists()


def test_validation_failure_discards_parser_warnings(engine, tmp_path):
    # 'args' not a list -> parser warning; empty command -> validator error
    src = write_json(tmp_path / "in.json", {"mcpServers": {"a": {"command": "", "args": "oops"}}})
    result = engine.convert("roocode", "cursor", src, tmp_path / "out.json")

    assert not result.success
    assert result.errors == ["Server 'a' (index 0) has no command"]
    assert result.warnings == []


def test_empty_servers_fail_validation(engine, tmp_path):
    src = write_json(tmp_path / "in.json", {"mcpServers": {}})
    result = engine.convert("roocode", "cursor", src, tmp_path / "out.json")
    assert not result.success
    assert result.errors == ["Configuration must contain at least one server"]


def test_warnings_merged_in_pipeline_order(tmp_path):
    """parser -> validator -> writer compat, each exactly once."""

    class BlankVersionParser(RooCodeParser):
        def parse_document(self, document, warnings):
            config = super().parse_document(document, warnings)
            config.version = ""
            return config

    engine = ConversionEngine([BlankVersionParser()], [OpenCodeWriter()])
    src = write_json(
        tmp_path / "in.json",
        {"mcpServers": {"fs": {"command": "npx server-fs", "disabled": True}}},
    )

    result = engine.convert("roocode", "opencode", src, tmp_path / "opencode.json")
    assert result.success
    assert result.warnings == [
        "Server 'fs': field 'disabled' is not supported and was dropped",
        "Configuration version is not specified",
        "Server 'fs': command 'npx server-fs' contains whitespace; "
        "OpenCode runs the command array without a shell",
    ]


# =============================================================================
# STRICT MODE
# =============================================================================


def _warning_input(tmp_path: Path) -> Path:
    return write_json(
        tmp_path / "in.json",
        {
            "mcpServers": {
                "fs": {"command": "npx", "args": ["-y", 3], "autoApprove": ["read"]},
                "gh": {"command": "gh", "env": {"TOKEN": None}},
            }
        },
    )


def test_strict_mode_promotes_every_warning(engine, tmp_path):
    src = _warning_input(tmp_path)

    relaxed = engine.convert("roocode", "cursor", src, tmp_path / "relaxed.json")
    assert relaxed.success
    n = len(relaxed.warnings)
    assert n >= 1

    strict_out = tmp_path / "strict.json"
    strict = engine.convert("roocode", "cursor", src, strict_out, strict=True)
    assert not strict.success
    assert len(strict.errors) == n + 1
    assert strict.errors[0] == f"Conversion failed in strict mode due to {n} warning(s)"
    assert strict.errors[1:] == relaxed.warnings
    assert not strict_out.exists()


def test_strict_mode_without_warnings_succeeds(engine, roocode_file, tmp_path):
    result = engine.convert("roocode", "cursor", roocode_file, tmp_path / "out.json", strict=True)
    assert result.success


def test_strict_mode_counts_compat_warnings_once(tmp_path):
    engine = ConversionEngine([RooCodeParser()], [OpenCodeWriter()])
    src = write_json(tmp_path / "in.json", {"mcpServers": {"fs": {"command": "npx fs"}}})

    relaxed = engine.convert("roocode", "opencode", src, tmp_path / "a.json")
    strict = engine.convert("roocode", "opencode", src, tmp_path / "b.json", strict=True)

    assert len(relaxed.warnings) == 1
    assert len(strict.errors) == 2


def test_repeated_server_key_fails_validation(engine, tmp_path):
    src = tmp_path / "in.json"
    src.write_text(
        '{"mcpServers": {"fs": {"command": "a"}, "gh": {"command": "b"}, "fs": {"command": "c"}}}',
        encoding="utf-8",
    )
    out = tmp_path / "out.json"

    result = engine.convert("roocode", "cursor", src, out)

    assert not result.success
    assert result.errors == ["Duplicate server names found: fs"]
    assert not out.exists()


def test_repeated_server_key_keeps_every_entry(tmp_path):
    src = tmp_path / "in.json"
    src.write_text('{"mcpServers": {"fs": {"command": "a"}, "fs": {"command": "b"}}}', encoding="utf-8")

    result = RooCodeParser().parse(src)

    assert result.success
    assert [(s.name, s.command) for s in result.config.servers] == [("fs", "a"), ("fs", "b")]


# =============================================================================
# WRITE FAILURE
# =============================================================================


def test_write_failure_is_returned_verbatim(engine, roocode_file, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    result = engine.convert("roocode", "cursor", roocode_file, blocker / "mcp.json")
    assert not result.success
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Error writing config:")


# =============================================================================
# REGISTRY
# =============================================================================


class _OtherCursorParser(BaseParser):
    @property
    def format_info(self) -> FormatInfo:
        return FormatInfo(name="Cursor", display_name="Other", default_path="x.json")

    def parse_document(self, document: Any, warnings: List[str]) -> McpConfig:
        return McpConfig()


def test_registry_rejects_different_handler_for_same_name():
    with pytest.raises(ValueError, match="Duplicate parser for agent 'cursor'"):
        AgentRegistry("parser", [CursorParser(), _OtherCursorParser()])


def test_engine_rejects_duplicate_parsers():
    with pytest.raises(ValueError):
        ConversionEngine([CursorParser(), _OtherCursorParser()], [CursorWriter()])


def test_registry_same_class_reregistration_replaces():
    first, second = RooCodeWriter(), RooCodeWriter()
    registry = AgentRegistry("writer", [first, second])
    assert len(registry) == 1
    assert registry.get("ROOCODE") is second
    assert "RooCode" in registry


def test_writer_compat_rejects_empty_config():
    result = CursorWriter().validate_compat(McpConfig())
    assert isinstance(result, ValidationResult)
    assert not result.valid
    assert result.errors == ["Configuration must contain at least one server"]


def test_scenario_json_is_stable(engine, roocode_file, tmp_path):
    out = tmp_path / "out.json"
    engine.convert("roocode", "cursor", roocode_file, out)
    first = out.read_text()
    engine.convert("roocode", "cursor", roocode_file, out)
    assert out.read_text() == first
    assert json.loads(first)["mcpServers"]["fs"]["command"] == "npx"


# =============================================================================
# VALIDATE SERVICE
# =============================================================================


def test_run_validate_uses_engine_validator(roocode_file):
    class NoisyValidator(ConfigValidator):
        def validate(self, config):
            result = super().validate(config)
            return ValidationResult.ok(result.warnings + ["checked"])

    engine = ConversionEngine([RooCodeParser()], [CursorWriter()], NoisyValidator())
    result = run_validate(engine, "roocode", roocode_file, verbose=False)

    assert result.valid
    assert result.warnings == ["checked"]
