import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .paths import SYNC_TOOLS
from .services import run_add, run_init, run_list, run_sync
from .services.add_service import ADD_KINDS
from .utils import Colors, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-dev",
        description="AI Dev System - shared AI assistant context for your projects",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # Init Subcommand
    init_parser = subparsers.add_parser("init", help="Initialize ai-dev-system in a project")
    init_parser.add_argument("--stack", default=None, help="Technology stack (skips detection)")
    init_parser.add_argument("--ai", default=None, help="AI tools to bridge, comma separated or 'all'")
    init_parser.add_argument("--dir", default=".", help="Target project directory")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing files")
    init_parser.add_argument("--no-bridge", action="store_true", help="Do not create AI tool bridges")
    init_parser.add_argument("--no-interactive", action="store_true", help="Never prompt")

    # Add Subcommand
    add_parser = subparsers.add_parser("add", help="Add a stack or skill to an initialized project")
    add_parser.add_argument("type", help=f"What to add ({'|'.join(ADD_KINDS)})")
    add_parser.add_argument("name", help="Stack or skill name")
    add_parser.add_argument("--dir", default=".", help="Target project directory")

    # Sync Subcommand
    sync_parser = subparsers.add_parser("sync", help="Sync ai-dev-system to AI tool formats")
    sync_parser.add_argument("tool", help=f"Target AI tool ({'|'.join(SYNC_TOOLS)}|all)")
    sync_parser.add_argument("--dir", "-d", default=".", help="Target project directory")

    # List Subcommand
    list_parser = subparsers.add_parser("list", help="List stacks, AI tools and skills")
    list_parser.add_argument("--dir", default=None, help="Also show how this project was initialized")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point of the application."""
    try:
        return _main_inner(argv)
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Cancelled.{Colors.ENDC}")
        sys.exit(130)


def _main_inner(argv: Optional[List[str]]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # User errors are reported by the services; the exit code stays 0.
    if args.command == "init":
        interactive = not args.no_interactive and sys.stdin.isatty()
        run_init(
            Path(args.dir),
            stack=args.stack,
            ai=args.ai,
            force=args.force,
            bridge=not args.no_bridge,
            interactive=interactive,
        )
    elif args.command == "add":
        run_add(args.type, args.name, Path(args.dir))
    elif args.command == "sync":
        run_sync(args.tool, Path(args.dir))
    elif args.command == "list":
        run_list(Path(args.dir) if args.dir else None)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
