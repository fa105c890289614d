"""Text <-> document codecs for the serializations agent configs use."""

import json
from typing import Any

import yaml

SERIALIZATIONS = ("json", "yaml")


class DecodeError(ValueError):
    """Raised when config text is not valid in its serialization."""


class RepeatedKeyObject(dict):
    """
    A JSON object whose text repeats a key.

    The dict itself holds the last value per key, as json.loads would.
    ``pairs`` keeps every entry in file order.
    """

    def __init__(self, pairs):
        super().__init__(pairs)
        self.pairs = list(pairs)


def _object_from_pairs(pairs):
    if len({key for key, _ in pairs}) != len(pairs):
        return RepeatedKeyObject(pairs)
    return dict(pairs)


def load_document(text: str, serialization: str = "json") -> Any:
    if serialization == "json":
        try:
            return json.loads(text, object_pairs_hook=_object_from_pairs)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid JSON format: {e}") from e
    if serialization == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(f"Invalid YAML format: {e}") from e
    raise ValueError(f"Unknown serialization '{serialization}'")


def dump_document(document: Any, serialization: str = "json") -> str:
    """
    Serialize a document deterministically.

    Key order follows insertion order of the document dicts; nothing is sorted.
    """
    if serialization == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    if serialization == "yaml":
        return yaml.safe_dump(
            document, sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    raise ValueError(f"Unknown serialization '{serialization}'")
