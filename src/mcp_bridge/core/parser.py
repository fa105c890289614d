"""
Parser base class.

Adding a new source agent = implement BaseParser.parse_document + register.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Tuple, Union

from .codec import DecodeError, load_document
from .types import ConversionResult, FormatInfo, McpConfig


class ParseError(Exception):
    """A format error that aborts the whole parse."""


class BaseParser(ABC):
    supported_versions: Tuple[str, ...] = ("1.0",)

    @property
    @abstractmethod
    def format_info(self) -> FormatInfo: ...

    @abstractmethod
    def parse_document(self, document: Any, warnings: List[str]) -> McpConfig:
        """
        Build the domain model from a decoded document.

        Raise ParseError for hard failures; append lenient recoveries to
        ``warnings``.
        """

    @property
    def agent_name(self) -> str:
        return self.format_info.name

    def parse(self, file_path: Union[str, Path]) -> ConversionResult:
        path = Path(file_path)
        try:
            if not path.is_file():
                return ConversionResult.failed(f"Input file not found: {path}")

            text = path.read_text(encoding="utf-8")
            warnings: List[str] = []
            try:
                document = load_document(text, self.format_info.serialization)
                config = self.parse_document(document, warnings)
            except (DecodeError, ParseError) as e:
                return ConversionResult.failed(str(e))

            return ConversionResult.succeeded(config, warnings)
        except Exception as e:
            return ConversionResult.failed(f"Unexpected error parsing config: {e}")
