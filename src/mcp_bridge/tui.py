"""
Interactive prompts for mcp-bridge.

Every questionary call lives here so the CLI stays a thin dispatcher.
"""

from typing import List, Optional

import questionary
from questionary import Style

# Questionary theme
CUSTOM_STYLE = Style(
    [
        ("qmark", "fg:#00d4ff bold"),
        ("question", "bold"),
        ("answer", "fg:#00d4ff bold"),
        ("pointer", "fg:#00d4ff bold"),
        ("highlighted", "fg:#00d4ff bold bg:default"),
        ("selected", "fg:#00d4ff bold bg:default"),
    ]
)


def select_agent(message: str, agent_names: List[str]) -> Optional[str]:
    """Let the user pick an agent. None if cancelled."""
    if not agent_names:
        return None
    return questionary.select(
        message,
        choices=[questionary.Choice(name, value=name) for name in agent_names],
        style=CUSTOM_STYLE,
    ).ask()


def confirm(question: str, default: bool = False) -> bool:
    """Yes/no prompt. Ctrl-C counts as no."""
    answer = questionary.confirm(question, default=default, style=CUSTOM_STYLE).ask()
    if answer is None:
        return False
    return bool(answer)
