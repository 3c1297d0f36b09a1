#!/usr/bin/env python3
"""
CLI entry point for the interactive shell (gitrepl command).
"""

from __future__ import annotations

import argparse
import logging
import sys

from gitrepl.cli.commands import load_all_commands
from gitrepl.cli.context import GREY, RESET, ShellContext
from gitrepl.config import DEFAULTS, get_config_manager, parse_value


def setup_logging(verbose: bool = False) -> None:
    """Send gitrepl log records to stderr in grey."""
    logger = logging.getLogger("gitrepl")
    logger.handlers = []
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"{GREY}%(levelname)s: %(message)s{RESET}"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_config() -> None:
    """Print current configuration."""
    cfg_mgr = get_config_manager()
    settings = cfg_mgr.list_settings()

    print(f"Config file: {cfg_mgr.CONFIG_FILE}")

    if settings:
        print("\nCustom settings:")
        for key, value in settings.items():
            print(f"  {key}: {value}")

    print("\nDefaults (used when not set):")
    for key, value in DEFAULTS.items():
        if key not in settings:
            print(f"  {key}: {value}")

    print("\nSet with: gitrepl --set-config key=value")
    print()


def set_config(assignment: str) -> int:
    """Apply a key=value assignment to the config file."""
    if "=" not in assignment:
        print(f"Error: expected key=value, got '{assignment}'", file=sys.stderr)
        return 2
    key, value_str = assignment.split("=", 1)
    key = key.strip()
    try:
        value = parse_value(key, value_str.strip())
        get_config_manager().set(key, value)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(f"Set {key} = {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    cfg_mgr = get_config_manager()
    parser = argparse.ArgumentParser(
        prog="gitrepl",
        description="Interactive shell for git workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Config file: {cfg_mgr.CONFIG_FILE}

Examples:
    gitrepl                             # Start the interactive shell
    gitrepl -c "status"                 # Run one command and exit
    gitrepl --simple                    # Plain input() prompt
    gitrepl --set-config search_limit=20
        """,
    )
    parser.add_argument("-c", "--command", help="Run a single command line and exit")
    parser.add_argument("--simple", action="store_true", default=None,
                        help="Use simple REPL (no prompt_toolkit)")
    parser.add_argument("--history-file", help="History file path")
    parser.add_argument("--alias-file", help="Alias file path")
    parser.add_argument("--config", action="store_true", help="Show current config and exit")
    parser.add_argument("--set-config", metavar="KEY=VALUE", help="Set a config value and exit")
    parser.add_argument("-v", "--verbose", action="store_true", default=None,
                        help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the gitrepl CLI."""
    cfg = get_config_manager().config
    args = build_parser().parse_args(argv)

    verbose = args.verbose if args.verbose is not None else cfg.get("verbose")
    setup_logging(verbose)

    if args.config:
        print_config()
        return 0
    if args.set_config:
        return set_config(args.set_config)

    load_all_commands(verbose=verbose)
    ctx = ShellContext.from_config(cfg, history_file=args.history_file, alias_file=args.alias_file)

    if args.command is not None:
        try:
            ctx.execute(args.command)
        finally:
            ctx.history.save()
            ctx.aliases.save()
        return 0

    simple = args.simple if args.simple is not None else cfg.get("simple")
    if simple or not sys.stdin.isatty():
        from gitrepl.cli._simple_repl import repl
    else:
        from gitrepl.cli import repl

    repl(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
