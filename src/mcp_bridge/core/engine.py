"""
Conversion engine: parse -> validate -> check target compat -> write.

Every step returns a result value. The first failing step ends the
conversion; nothing is written to disk unless every check before the write
has passed.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .parser import BaseParser
from .registry import AgentRegistry
from .types import ConversionResult
from .validator import ConfigValidator
from .writer import BaseWriter


class ConversionEngine:
    def __init__(
        self,
        parsers: Iterable[BaseParser],
        writers: Iterable[BaseWriter],
        validator: Optional[ConfigValidator] = None,
    ):
        self._parsers = AgentRegistry("parser", parsers)
        self._writers = AgentRegistry("writer", writers)
        self._validator = validator or ConfigValidator()

    @property
    def validator(self) -> ConfigValidator:
        return self._validator

    def list_source_agents(self) -> List[str]:
        return self._parsers.names()

    def list_target_agents(self) -> List[str]:
        return self._writers.names()

    def get_parser(self, agent: str) -> Optional[BaseParser]:
        return self._parsers.get(agent)

    def get_writer(self, agent: str) -> Optional[BaseWriter]:
        return self._writers.get(agent)

    def convert(
        self,
        source_agent: str,
        target_agent: str,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        strict: bool = False,
    ) -> ConversionResult:
        parser = self._parsers.get(source_agent)
        if parser is None:
            return ConversionResult.failed(
                f"No parser found for agent '{source_agent}'",
                f"Available source agents: {', '.join(self.list_source_agents())}",
            )

        writer = self._writers.get(target_agent)
        if writer is None:
            return ConversionResult.failed(
                f"No writer found for agent '{target_agent}'",
                f"Available target agents: {', '.join(self.list_target_agents())}",
            )

        parsed = parser.parse(input_path)
        if not parsed.success:
            return parsed

        config = parsed.config
        warnings = list(parsed.warnings)

        # Parser warnings are dropped here: a broken config reports validator errors only.
        validation = self._validator.validate(config)
        if not validation.valid:
            return ConversionResult.failed(*validation.errors)
        warnings.extend(validation.warnings)

        compat = writer.validate_compat(config)
        if not compat.valid:
            return ConversionResult.failed(
                f"Configuration is not compatible with {writer.agent_name} format",
                *compat.errors,
            )
        warnings.extend(compat.warnings)

        if strict and warnings:
            return ConversionResult.failed(
                f"Conversion failed in strict mode due to {len(warnings)} warning(s)",
                *warnings,
            )

        written = writer.write(config, output_path)
        if not written.success:
            return written

        # write() re-runs validate_compat; its warnings are already counted.
        warnings.extend(w for w in written.warnings if w not in compat.warnings)
        return ConversionResult.succeeded(config, warnings)
