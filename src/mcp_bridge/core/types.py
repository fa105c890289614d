"""Shared types and data structures for MCP Bridge."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_VERSION = "1.0"


@dataclass
class McpServer:
    """One runnable MCP server entry."""
    name: str = ""
    command: str = ""
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)


@dataclass
class McpConfig:
    """
    Agent-agnostic MCP configuration.

    Every conversion passes through this model. ``metadata`` keeps
    agent-specific JSON values that have no common field.
    """
    version: str = DEFAULT_VERSION
    servers: List[McpServer] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, warnings: Optional[List[str]] = None) -> "ValidationResult":
        return cls(valid=True, warnings=list(warnings or []))

    @classmethod
    def invalid(cls, *errors: str) -> "ValidationResult":
        return cls(valid=False, errors=list(errors))


@dataclass(frozen=True)
class ConversionResult:
    success: bool
    config: Optional[McpConfig] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def succeeded(
        cls, config: McpConfig, warnings: Optional[List[str]] = None
    ) -> "ConversionResult":
        return cls(success=True, config=config, warnings=list(warnings or []))

    @classmethod
    def failed(cls, *errors: str) -> "ConversionResult":
        return cls(success=False, errors=list(errors))


@dataclass
class FormatInfo:
    """Metadata about one agent's MCP config format."""
    name: str
    display_name: str
    default_path: str
    serialization: str = "json"  # "json" | "yaml"
    status: str = "beta"
    description: str = ""
