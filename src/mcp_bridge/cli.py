"""
CLI entry point: thin dispatcher only.

Parse args -> call service -> print result.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from mcp_bridge.utils import Colors, print_messages, resolve_config_path


def main():
    try:
        code = _main()
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Cancelled.{Colors.ENDC}")
        sys.exit(130)
    sys.exit(code)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-bridge",
        description="MCP Bridge - convert MCP server configs between AI coding agents",
    )
    sub = parser.add_subparsers(dest="command", help="Command")

    # --- convert ---
    p_convert = sub.add_parser("convert", help="Convert an MCP config from one agent format to another")
    p_convert.add_argument("--from", "-f", dest="source", help="Source agent format (e.g. cursor)")
    p_convert.add_argument("--to", "-t", dest="target", help="Target agent format (e.g. roocode)")
    p_convert.add_argument("--input", "-i", help="Source config file (default: the agent's usual path)")
    p_convert.add_argument("--output", "-o", help="Destination config file (default: the agent's usual path)")
    p_convert.add_argument("--strict", action="store_true", help="Fail if any warning occurs")
    p_convert.add_argument("--force", action="store_true", help="Overwrite without prompting")
    p_convert.add_argument("--quiet", "-q", action="store_true", help="Only print the outcome")

    # --- validate ---
    p_validate = sub.add_parser("validate", help="Parse and validate a config without converting")
    p_validate.add_argument("--agent", "-a", required=True, help="Agent format of the file")
    p_validate.add_argument("--input", "-i", help="Config file (default: the agent's usual path)")

    # --- list ---
    sub.add_parser("list", help="List supported agent formats")

    return parser


def _main(argv: Optional[list] = None) -> int:
    from mcp_bridge.core import build_engine

    parser = _build_parser()
    args = parser.parse_args(argv)
    engine = build_engine()

    if args.command == "convert":
        return _handle_convert(args, engine)
    if args.command == "validate":
        return _handle_validate(args, engine)
    if args.command == "list":
        return _handle_list(engine)

    parser.print_help()
    return 0


def _interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _pick_agent(given: Optional[str], message: str, names: list) -> Optional[str]:
    if given:
        return given
    if not _interactive():
        return None
    from mcp_bridge.tui import select_agent

    return select_agent(message, names)


def _handle_convert(args, engine) -> int:
    from mcp_bridge.services.convert_service import run_convert
    from mcp_bridge.tui import confirm

    source = _pick_agent(args.source, "Source agent:", engine.list_source_agents())
    target = _pick_agent(args.target, "Target agent:", engine.list_target_agents())
    if not source or not target:
        print(f"{Colors.RED}ERROR: both --from and --to are required.{Colors.ENDC}")
        return 1

    parser = engine.get_parser(source)
    writer = engine.get_writer(target)
    verbose = not args.quiet

    try:
        if parser is not None and writer is not None:
            input_path = resolve_config_path(args.input, parser.format_info.default_path)
            output_path = resolve_config_path(args.output, writer.format_info.default_path)

            if not input_path.is_file():
                print(f"{Colors.RED}ERROR: Input file not found: {input_path}{Colors.ENDC}")
                return 1

            if output_path.exists() and not args.force:
                if not confirm(f"Output file '{output_path}' already exists. Overwrite?"):
                    print("Operation cancelled.")
                    return 0

            out_dir = output_path.parent
            if not out_dir.exists() and not args.force:
                if not confirm(f"Output directory '{out_dir}' does not exist. Create it?"):
                    print("Operation cancelled.")
                    return 0
        else:
            # Unknown agent: the engine reports it and the lists of known agents
            input_path = Path(args.input or "")
            output_path = Path(args.output or "")

        result = run_convert(
            engine, source, target, input_path, output_path, strict=args.strict, verbose=verbose
        )
    except Exception as e:
        print(f"{Colors.RED}\nERROR: Unexpected error during conversion{Colors.ENDC}")
        print(f"  {e}")
        return 1

    if result.success:
        print(f"{Colors.GREEN}\nSuccessfully converted config from {source} to {target}{Colors.ENDC}")
        print_messages("WARNINGS", result.warnings, Colors.YELLOW)
        return 0

    print(f"{Colors.RED}\nConversion failed{Colors.ENDC}")
    print_messages("ERRORS", result.errors, Colors.RED)
    return 1


def _handle_validate(args, engine) -> int:
    from mcp_bridge.services.convert_service import run_validate

    parser = engine.get_parser(args.agent)
    if parser is not None:
        input_path = resolve_config_path(args.input, parser.format_info.default_path)
    else:
        input_path = Path(args.input or "")

    result = run_validate(engine, args.agent, input_path)
    if result.valid:
        print(f"{Colors.GREEN}\n{input_path} is a valid {args.agent} config{Colors.ENDC}")
        print_messages("WARNINGS", result.warnings, Colors.YELLOW)
        return 0

    print(f"{Colors.RED}\nValidation failed{Colors.ENDC}")
    print_messages("ERRORS", result.errors, Colors.RED)
    return 1


def _handle_list(engine) -> int:
    print(f"{Colors.BLUE}Source formats (--from):{Colors.ENDC}")
    for name in engine.list_source_agents():
        info = engine.get_parser(name).format_info
        print(f"  - {info.name}: {info.display_name} ({info.default_path}) [{info.status}]")

    print(f"{Colors.BLUE}Target formats (--to):{Colors.ENDC}")
    for name in engine.list_target_agents():
        info = engine.get_writer(name).format_info
        print(f"  - {info.name}: {info.display_name} ({info.default_path}) [{info.status}]")
    return 0


if __name__ == "__main__":
    main()
