"""
logictree.cli - Command-line interface.

Main entry point for the logictree CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import tomlkit

from logictree import __version__
from logictree.config import TRANSPORTS, ConfigError, get_config

COMPLETION_SHELLS = ("bash", "zsh", "fish", "tcsh")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="logictree",
        description="Hierarchical problem analysis with logic trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  logictree mcp serve                 # Run the MCP server on stdio
  logictree mcp serve --transport sse # Run the MCP server over SSE
  logictree config show               # Show the effective configuration
  logictree config path               # Show the config file location

Configuration:
  .logictree.toml in the working directory (or a parent directory),
  LOGICTREE_<SECTION>_<KEY> environment variables,
  DISABLE_TREE_LOGGING=true to silence the tree echo on stderr.
        """,
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Show tracebacks on error")
    parser.add_argument(
        "--directory",
        type=Path,
        default=None,
        help="Directory to start the config file search from (default: cwd)",
    )

    subparsers = parser.add_subparsers(dest="command", title="commands")

    subparsers.add_parser("version", help="Show version")

    completion_parser = subparsers.add_parser(
        "completion",
        help="Generate shell tab-completion scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Shell Completion Setup:

  First, install the completion extra:
    pip install logictree[completion]

  Bash (add to ~/.bashrc):
    eval "$(register-python-argcomplete logictree)"

  Fish (add to ~/.config/fish/config.fish):
    register-python-argcomplete --shell fish logictree | source
""",
    )
    completion_parser.add_argument(
        "--shell",
        choices=COMPLETION_SHELLS,
        help="Generate script for specific shell",
    )

    mcp_parser = subparsers.add_parser("mcp", help="MCP server commands")
    mcp_sub = mcp_parser.add_subparsers(dest="mcp_action")
    serve_parser = mcp_sub.add_parser("serve", help="Run the MCP server")
    serve_parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default=None,
        help="Transport type (default: from config, normally stdio)",
    )

    config_parser = subparsers.add_parser("config", help="Configuration commands")
    config_sub = config_parser.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="Print the effective configuration as TOML")
    config_sub.add_parser("path", help="Print the config file location")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "version":
            return version_command(args)
        elif args.command == "completion":
            return completion_command(args)
        elif args.command == "mcp":
            return mcp_command(args)
        elif args.command == "config":
            return config_command(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


def version_command(args: argparse.Namespace) -> int:
    """Handle version command."""
    print(f"logictree {__version__}")
    return 0


def completion_command(args: argparse.Namespace) -> int:
    """Handle completion command - generate shell completion scripts."""
    try:
        import argcomplete
    except ImportError:
        print("Error: argcomplete not installed.", file=sys.stderr)
        print("Install with: pip install logictree[completion]", file=sys.stderr)
        return 1

    if args.shell:
        print(argcomplete.shellcode(["logictree"], shell=args.shell))
        return 0

    print("""
Shell Completion Setup for logictree
====================================

Bash (add to ~/.bashrc):
  eval "$(register-python-argcomplete logictree)"

Zsh (add to ~/.zshrc):
  autoload -U bashcompinit
  bashcompinit
  eval "$(register-python-argcomplete logictree)"

Fish (add to ~/.config/fish/config.fish):
  register-python-argcomplete --shell fish logictree | source

Generate script for a specific shell:
  logictree completion --shell bash
""")
    return 0


def config_command(args: argparse.Namespace) -> int:
    """Handle config commands."""
    try:
        config = get_config(start_path=args.directory)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.config_action == "show":
        print(tomlkit.dumps(config.to_dict()), end="")
        return 0
    elif args.config_action == "path":
        if config.config_path is None:
            print("No .logictree.toml found (using defaults)")
            return 1
        print(config.config_path)
        return 0
    else:
        print("Usage: logictree config {show|path}")
        return 1


def mcp_command(args: argparse.Namespace) -> int:
    """Handle MCP server commands."""
    from logictree.mcp import MCP_AVAILABLE, run_server

    if not MCP_AVAILABLE:
        print("Error: MCP dependencies not installed.", file=sys.stderr)
        print("Install with: pip install logictree[mcp]", file=sys.stderr)
        return 1

    if args.mcp_action == "serve":
        # stdout belongs to the stdio transport, so status goes to stderr
        try:
            run_server(working_dir=args.directory, transport=args.transport)
        except KeyboardInterrupt:
            print("\nServer stopped.", file=sys.stderr)
        return 0
    else:
        print("Usage: logictree mcp serve")
        return 1


if __name__ == "__main__":
    sys.exit(main())
