"""
Entry-level helpers shared by every agent format.

Required fields raise ParseError. Optional fields of the wrong shape fall back
to empty containers and leave a warning behind.
"""

from typing import Any, Dict, Iterable, List, Tuple

from mcp_bridge.core.codec import RepeatedKeyObject
from mcp_bridge.core.parser import ParseError
from mcp_bridge.core.types import McpServer


def require_property(document: Any, key: str, kind: type = dict) -> Any:
    """Return document[key], checking it exists and has the expected shape."""
    if not isinstance(document, dict) or key not in document:
        raise ParseError(f"Missing required property '{key}'")
    value = document[key]
    if not isinstance(value, kind):
        shape = "an object" if kind is dict else "a list"
        raise ParseError(f"Property '{key}' must be {shape}")
    return value


def server_items(servers: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """(name, entry) pairs in file order. A repeated name yields one pair per entry."""
    if isinstance(servers, RepeatedKeyObject):
        return list(servers.pairs)
    return list(servers.items())


def extra_properties(document: Dict[str, Any], *consumed: str) -> Dict[str, Any]:
    """Top-level keys the domain model does not consume, kept as metadata."""
    return {k: v for k, v in document.items() if k not in consumed}


def require_entry(name: str, entry: Any) -> Dict[str, Any]:
    if not isinstance(entry, dict):
        raise ParseError(f"Server '{name}' must be an object")
    return entry


def require_command(name: str, entry: Dict[str, Any], key: str = "command") -> str:
    if key not in entry:
        raise ParseError(f"Server '{name}' is missing required field '{key}'")
    command = entry[key]
    if command is None:
        return ""
    if not isinstance(command, str):
        raise ParseError(f"Server '{name}' field '{key}' must be a string")
    return command


def read_args(name: str, value: Any, warnings: List[str], key: str = "args") -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        warnings.append(f"Server '{name}': '{key}' is not a list and was ignored")
        return []
    args = []
    for i, item in enumerate(value):
        if isinstance(item, str):
            args.append(item)
        else:
            warnings.append(f"Server '{name}': dropped non-string {key} item at index {i}")
    return args


def read_env(name: str, value: Any, warnings: List[str], key: str = "env") -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        warnings.append(f"Server '{name}': '{key}' is not an object and was ignored")
        return {}
    env = {}
    for var, val in value.items():
        if isinstance(val, str):
            env[str(var)] = val
        else:
            warnings.append(f"Server '{name}': dropped non-string {key} value '{var}'")
    return env


def warn_unsupported(
    name: str, entry: Dict[str, Any], known: Iterable[str], warnings: List[str]
) -> None:
    for key in entry:
        if key not in known:
            warnings.append(f"Server '{name}': field '{key}' is not supported and was dropped")


def command_entry(server: McpServer, args_key: str = "args", env_key: str = "env") -> Dict[str, Any]:
    """command first, then args/env only when non-empty."""
    entry: Dict[str, Any] = {"command": server.command}
    if server.args:
        entry[args_key] = list(server.args)
    if server.env:
        entry[env_key] = dict(server.env)
    return entry
