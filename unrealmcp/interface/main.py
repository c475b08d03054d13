"""Main entry point for unreal-mcp."""

import argparse
import asyncio
import logging
import sys

from ..config import Settings, update_settings
from ..config.constants import APP_NAME, APP_VERSION, ROUTE_INFO
from ..errors import ConfigError, UnrealMCPError
from .utils import console, setup_logging, tools_table

logger = logging.getLogger(__name__)


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="MCP server for the Unreal Engine Remote Control API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  unreal-mcp                          Serve MCP over stdio
  unreal-mcp --host 10.0.0.5 serve    Serve against a remote editor
  unreal-mcp check                    Test the Remote Control connection
  unreal-mcp tools list               List available tools
        """,
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    subparsers.add_parser("serve", help="Serve MCP over stdio (default)")
    subparsers.add_parser("check", help="Test the Remote Control connection")

    # Tools subcommand
    tools_parser = subparsers.add_parser("tools", help="Inspect tools")
    tools_subparsers = tools_parser.add_subparsers(
        dest="tools_command", help="Tool commands"
    )
    tools_subparsers.add_parser("list", help="List all available tools")
    tools_info = tools_subparsers.add_parser("info", help="Show tool details")
    tools_info.add_argument("name", help="Tool name")

    # Overrides for UE_* environment settings
    parser.add_argument("--host", help="Unreal Engine host (UE_HOST)")
    parser.add_argument("--port", type=int, help="Remote Control port (UE_PORT)")
    parser.add_argument("--ssh-user", help="SSH user for output readback (UE_SSH_USER)")
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )

    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Settings from the environment with command-line overrides applied."""
    overrides = {
        "ue_host": args.host,
        "ue_port": args.port,
        "ssh_user": args.ssh_user,
        "debug": args.debug,
    }
    return update_settings(**{k: v for k, v in overrides.items() if v is not None})


def handle_tools_command(args: argparse.Namespace, settings: Settings):
    """Handle tools subcommand."""
    from ..tools import apply_disabled, get_all_tools, get_tool

    apply_disabled(settings.disabled_tools)

    if args.tools_command == "list":
        tools = get_all_tools()
        console.print(tools_table(tools))
        console.print(f"\nTotal: {len(tools)} tools")

    elif args.tools_command == "info":
        tool = get_tool(args.name)
        if not tool:
            console.print(f"[red]Tool not found: {args.name}[/]")
            return 1

        console.print(f"\n[bold cyan]{tool.name}[/]")
        console.print(f"[dim]Category:[/] {tool.category}")
        console.print(f"\n{tool.description}")

        if tool.schema.properties:
            console.print("\n[bold]Parameters:[/]")
            for name, props in tool.schema.properties.items():
                required = (
                    "required" if name in (tool.schema.required or []) else "optional"
                )
                ptype = props.get("type", "any")
                desc = props.get("description", "")
                console.print(f"  [cyan]{name}[/] ({ptype}, {required}): {desc}")

    else:
        console.print("[yellow]Use 'unreal-mcp tools --help' for commands[/]")
    return 0


async def check_connection(settings: Settings) -> int:
    """Query the Remote Control endpoint and report what it serves."""
    from ..remote import RemoteControlClient

    client = RemoteControlClient(settings.base_url, timeout=settings.http_timeout)
    console.print(f"[bold]Checking {settings.base_url}[/]\n")
    try:
        info = await client.get(ROUTE_INFO)
    except UnrealMCPError as e:
        console.print(f"[red]x {e.message}[/]")
        return 1

    routes = info.get("HttpRoutes", []) if isinstance(info, dict) else []
    console.print("[green]+ Remote Control API reachable[/]")
    console.print(f"  Routes: {len(routes)}")
    return 0


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        settings = build_settings(args)
    except ConfigError as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e.message)
        sys.exit(1)

    setup_logging(settings.debug)

    if args.command == "tools":
        sys.exit(handle_tools_command(args, settings))

    if args.command == "check":
        sys.exit(asyncio.run(check_connection(settings)))

    from ..mcp import run_stdio

    try:
        asyncio.run(run_stdio(settings))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
