"""
TimeForged MCP CLI entry point.

Usage:
    python -m timeforged_mcp                      # Run MCP server
    python -m timeforged_mcp serve                # Run MCP server
    python -m timeforged_mcp status               # Check daemon status once
    python -m timeforged_mcp install              # Add to Claude Desktop
    python -m timeforged_mcp install --force      # Overwrite existing entry
    python -m timeforged_mcp install --remove     # Remove from Claude Desktop
"""

import argparse
import asyncio
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timeforged-mcp",
        description="TimeForged MCP server"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # serve command
    subparsers.add_parser("serve", help="Run MCP server")

    # status command
    subparsers.add_parser("status", help="Check TimeForged daemon status")

    # install command
    install_parser = subparsers.add_parser("install", help="Add to Claude Desktop")
    install_parser.add_argument(
        "--remove", "-r",
        action="store_true",
        dest="uninstall",
        help="Remove from Claude Desktop"
    )
    install_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing entry"
    )
    install_parser.add_argument(
        "--name", "-n",
        default="timeforged",
        help="Server name in config (default: timeforged)"
    )

    return parser


def run_status() -> int:
    """Print daemon status. Returns exit code (0 = success, 1 = error)."""
    from timeforged_mcp.api.client import TimeForgedClient
    from timeforged_mcp.settings import Settings
    from timeforged_mcp.tools.status import status

    output = asyncio.run(status(TimeForgedClient(Settings())))
    print(output.text)
    return 1 if output.is_error else 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "status":
        sys.exit(run_status())

    elif args.command == "install":
        from timeforged_mcp.cli.install import run_install
        sys.exit(run_install(
            uninstall=args.uninstall,
            force=args.force,
            name=args.name,
        ))

    elif args.command in ("serve", None):
        # Default to serve if no command given
        from timeforged_mcp.server import serve
        serve()

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
