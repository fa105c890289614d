"""
Writer base class.

Adding a new target agent = implement BaseWriter.build_document + register.
"""

from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Union

from .codec import dump_document
from .types import ConversionResult, FormatInfo, McpConfig, McpServer, ValidationResult


class BaseWriter(ABC):
    @property
    @abstractmethod
    def format_info(self) -> FormatInfo: ...

    @abstractmethod
    def build_document(self, config: McpConfig) -> Dict[str, Any]:
        """Map the domain model onto the agent's on-disk structure."""

    @property
    def agent_name(self) -> str:
        return self.format_info.name

    def check_server(self, server: McpServer, errors: List[str], warnings: List[str]) -> None:
        """Format-specific per-server rules. Baseline formats have none."""

    def validate_compat(self, config: McpConfig) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        if not config.servers:
            errors.append("Configuration must contain at least one server")
        else:
            for server in config.servers:
                if not (server.name or "").strip():
                    errors.append("Server name cannot be empty")
                if not (server.command or "").strip():
                    errors.append(f"Server '{server.name}' must have a command")
                self.check_server(server, errors, warnings)

            counts = Counter(s.name for s in config.servers if (s.name or "").strip())
            duplicates = [name for name, n in counts.items() if n > 1]
            if duplicates:
                errors.append(f"Duplicate server names found: {', '.join(str(n) for n in duplicates)}")

        if errors:
            return ValidationResult.invalid(*errors)
        return ValidationResult.ok(warnings)

    def render(self, config: McpConfig) -> str:
        return dump_document(self.build_document(config), self.format_info.serialization)

    def write(self, config: McpConfig, output_path: Union[str, Path]) -> ConversionResult:
        try:
            validation = self.validate_compat(config)
            if not validation.valid:
                return ConversionResult.failed(*validation.errors)

            content = self.render(config)
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

            return ConversionResult.succeeded(config, validation.warnings)
        except Exception as e:
            return ConversionResult.failed(f"Error writing config: {e}")
