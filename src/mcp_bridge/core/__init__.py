"""Core abstractions for MCP Bridge."""

from .types import (
    DEFAULT_VERSION,
    ConversionResult,
    FormatInfo,
    McpConfig,
    McpServer,
    ValidationResult,
)
from .parser import BaseParser, ParseError
from .writer import BaseWriter
from .registry import AgentRegistry, parser_registry, writer_registry
from .validator import ConfigValidator
from .engine import ConversionEngine


def build_engine() -> ConversionEngine:
    """Engine over every registered agent format."""
    from mcp_bridge import converters  # noqa: F401

    return ConversionEngine(parser_registry.all(), writer_registry.all(), ConfigValidator())


__all__ = [
    "DEFAULT_VERSION",
    "ConversionResult",
    "FormatInfo",
    "McpConfig",
    "McpServer",
    "ValidationResult",
    "BaseParser",
    "ParseError",
    "BaseWriter",
    "AgentRegistry",
    "parser_registry",
    "writer_registry",
    "ConfigValidator",
    "ConversionEngine",
    "build_engine",
]
