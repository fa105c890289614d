"""
Agent-name -> handler registries.

Each converter module registers its parser and writer on import, so adding an
agent = new module in converters/ + two register() calls.
"""

from typing import Dict, Iterable, List, Optional, Type


class AgentRegistry:
    """
    Lower-cased agent name -> handler instance.

    A second handler of the same class replaces the first; a handler of a
    different class under a taken name raises ValueError.
    """

    def __init__(self, kind: str, handlers: Iterable = ()):
        self.kind = kind
        self._handlers: Dict[str, object] = {}
        for handler in handlers:
            self.add(handler)

    def add(self, handler) -> None:
        key = handler.agent_name.lower()
        existing = self._handlers.get(key)
        if existing is not None and type(existing) is not type(handler):
            raise ValueError(
                f"Duplicate {self.kind} for agent '{key}': "
                f"{type(existing).__name__} and {type(handler).__name__}"
            )
        self._handlers[key] = handler

    def register(self, handler_class: Type) -> None:
        self.add(handler_class())

    def get(self, name: str) -> Optional[object]:
        return self._handlers.get(name.lower())

    def all(self) -> List[object]:
        return [self._handlers[k] for k in self.names()]

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


parser_registry = AgentRegistry("parser")
writer_registry = AgentRegistry("writer")
