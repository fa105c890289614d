from pathlib import Path
from typing import List, Optional


# ANSI colors
class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    ENDC = '\033[0m'


def resolve_config_path(explicit: Optional[str], default_path: str, base: Optional[Path] = None) -> Path:
    """
    Pick the config file path for an agent.

    Args:
        explicit: Path given on the command line, if any.
        default_path: The agent's conventional location (relative).
        base: Directory the default is resolved against (cwd if None).

    Returns:
        The explicit path when given, otherwise base / default_path.
    """
    if explicit:
        return Path(explicit)
    return (base or Path.cwd()) / default_path


def print_messages(title: str, messages: List[str], color: str) -> None:
    """Print a titled, bulleted message list in one color."""
    if not messages:
        return
    print(f"{color}\n{title} ({len(messages)}):")
    for message in messages:
        print(f"  - {message}")
    print(Colors.ENDC, end="")
