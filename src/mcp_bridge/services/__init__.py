"""
Services: business logic kept out of the CLI.
"""

from mcp_bridge.services.convert_service import run_convert, run_validate

__all__ = ["run_convert", "run_validate"]
