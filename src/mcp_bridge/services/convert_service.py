"""
Business logic for 'mcp-bridge convert' and 'mcp-bridge validate'.

Flow: print progress -> run the engine -> hand the result back to the CLI.
Prompting and exit codes stay in cli.py.
"""

from pathlib import Path
from typing import Union

from mcp_bridge.core.engine import ConversionEngine
from mcp_bridge.core.types import ConversionResult, ValidationResult
from mcp_bridge.utils import Colors


def run_convert(
    engine: ConversionEngine,
    source_agent: str,
    target_agent: str,
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    strict: bool = False,
    verbose: bool = True,
) -> ConversionResult:
    """
    Run one conversion and report progress.

    Args:
        engine: Engine with the registered parsers/writers
        source_agent: Agent the input file belongs to (e.g. "cursor")
        target_agent: Agent to write for (e.g. "roocode")
        input_path: Source config file
        output_path: Destination config file
        strict: Treat warnings as errors
        verbose: Print progress

    Returns:
        The engine's ConversionResult, unchanged.
    """
    if verbose:
        print(f"{Colors.BLUE}Reading config from {input_path}...{Colors.ENDC}")
        print(f"{Colors.BLUE}Parsing {source_agent} config...{Colors.ENDC}")
        print(f"{Colors.BLUE}Converting to {target_agent} format...{Colors.ENDC}")
        if strict:
            print(f"{Colors.BLUE}Strict mode: warnings will fail the conversion.{Colors.ENDC}")

    result = engine.convert(source_agent, target_agent, input_path, output_path, strict=strict)

    if verbose and result.success:
        print(f"{Colors.BLUE}Writing config to {output_path}...{Colors.ENDC}")
    return result


def run_validate(
    engine: ConversionEngine,
    agent: str,
    input_path: Union[str, Path],
    verbose: bool = True,
) -> ValidationResult:
    """Parse and validate one file without writing anything."""
    parser = engine.get_parser(agent)
    if parser is None:
        return ValidationResult.invalid(
            f"No parser found for agent '{agent}'",
            f"Available source agents: {', '.join(engine.list_source_agents())}",
        )

    if verbose:
        print(f"{Colors.BLUE}Validating {agent} config {input_path}...{Colors.ENDC}")

    parsed = parser.parse(input_path)
    if not parsed.success:
        return ValidationResult.invalid(*parsed.errors)

    validation = engine.validator.validate(parsed.config)
    if not validation.valid:
        return validation
    return ValidationResult.ok(list(parsed.warnings) + list(validation.warnings))
