"""Command-line entry point for stand."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_VERSION = "0.1.0"
_DESCRIPTION = "A CLI tool for explicit environment variable management"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand."""
    parser = argparse.ArgumentParser(prog="stand", description=_DESCRIPTION)
    parser.add_argument("-V", "--version", action="version", version=f"stand {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    init = commands.add_parser("init", help="Initialize Stand in the current directory")
    init.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force initialization even if Stand is already initialized",
    )

    shell = commands.add_parser("shell", help="Start a subshell with the specified environment")
    shell.add_argument("environment", help="Environment name to activate")

    exec_ = commands.add_parser("exec", help="Execute a command with the specified environment")
    exec_.add_argument("environment", help="Environment name to use")
    exec_.add_argument("command_args", nargs="*", metavar="command", help="Command to execute")

    commands.add_parser("list", help="List all available environments")

    show = commands.add_parser("show", help="Show environment variables for an environment")
    show.add_argument("environment", help="Environment name")
    show.add_argument(
        "-v",
        "--values",
        action="store_true",
        help="Show actual values instead of hiding them",
    )

    switch = commands.add_parser("switch", help="Switch the default environment")
    switch.add_argument("environment", help="Environment name to set as default")

    set_ = commands.add_parser("set", help="Set a session variable")
    set_.add_argument("name", help="Variable name")
    set_.add_argument("value", help="Variable value")

    unset = commands.add_parser("unset", help="Unset a variable")
    unset.add_argument("name", help="Variable name")

    commands.add_parser("validate", help="Validate the configuration")
    commands.add_parser("current", help="Show the current active environment")
    return parser


def _describe(args: argparse.Namespace) -> str:
    match args.command:
        case "init":
            return f"Init command called with force: {str(args.force).lower()}"
        case "shell":
            return f"Shell command called with environment: {args.environment}"
        case "exec":
            listed = "[" + ", ".join(f'"{part}"' for part in args.command_args) + "]"
            return (
                f"Exec command called with environment: {args.environment} "
                f"and command: {listed}"
            )
        case "list":
            return "List command called"
        case "show":
            return (
                f"Show command called with environment: {args.environment} "
                f"and values: {str(args.values).lower()}"
            )
        case "switch":
            return f"Switch command called with environment: {args.environment}"
        case "set":
            return f"Set command called with name: {args.name} and value: {args.value}"
        case "unset":
            return f"Unset command called with name: {args.name}"
        case "validate":
            return "Validate command called"
        case "current":
            return "Current command called"
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the chosen command; returns the exit status."""
    args = build_parser().parse_args(argv)
    print(_describe(args))
    # No command is carried out yet, so every command reports failure.
    return 1


if __name__ == "__main__":
    sys.exit(main())