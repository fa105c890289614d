"""Agent-agnostic structural validation of McpConfig."""

from collections import Counter
from typing import List, Optional

from .types import McpConfig, ValidationResult


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class ConfigValidator:
    """
    Checks a parsed config before any writer sees it.

    All rules are accumulated so callers get the complete error list. The
    only short-circuits are a missing config and a missing servers list.
    """

    def validate(self, config: Optional[McpConfig]) -> ValidationResult:
        if config is None:
            return ValidationResult.invalid("Configuration cannot be null")
        if config.servers is None:
            return ValidationResult.invalid("Servers list cannot be null")

        errors: List[str] = []
        warnings: List[str] = []

        if _blank(config.version):
            warnings.append("Configuration version is not specified")

        if not config.servers:
            errors.append("Configuration must contain at least one server")

        for i, server in enumerate(config.servers):
            if _blank(server.name):
                errors.append(f"Server at index {i} has no name")
            if _blank(server.command):
                errors.append(f"Server '{server.name}' (index {i}) has no command")
            if server.args is None:
                errors.append(f"Server '{server.name}' has null Args list")
            if server.env is None:
                errors.append(f"Server '{server.name}' has null Env dictionary")

        counts = Counter(s.name for s in config.servers)
        duplicates = [name for name, n in counts.items() if n > 1]
        if duplicates:
            errors.append(f"Duplicate server names found: {', '.join(str(n) for n in duplicates)}")

        if errors:
            return ValidationResult.invalid(*errors)
        return ValidationResult.ok(warnings)
