"""
ABOUTME: Command-line interface for inspecting typed environment variables
ABOUTME: Handles argument parsing, rich output and the main entry point
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ACCESSORS
from .exceptions import ConfigError

console = Console()


def cli(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the env-var-parser CLI tool.

    Parameters:
        argv (list[str], optional): Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        argparse.Namespace: Parsed arguments selecting the variables, target type, optional mode and output format.
    """
    p = argparse.ArgumentParser(
        description="Read environment variables and coerce them to typed values"
    )
    p.add_argument(
        "names",
        nargs="+",
        metavar="NAME",
        help="Environment variable names to read",
    )
    p.add_argument(
        "--type",
        dest="var_type",
        default="string",
        choices=list(ACCESSORS),
        help="Type to coerce each variable to",
    )
    p.add_argument(
        "--optional",
        action="store_true",
        help="Treat missing or empty variables as unset instead of an error",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format instead of a rich console table",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"env-var-parser {__version__}",
    )
    return p.parse_args(argv)


def resolve(names: list[str], var_type: str, optional: bool) -> dict:
    """
    Read each variable with the accessor for ``var_type``.

    Returns:
        dict: Variable name to typed value, or None for an unset optional variable.

    Raises:
        ConfigError: On the first variable that cannot be read.
    """
    required_accessor, optional_accessor = ACCESSORS[var_type]
    accessor = optional_accessor if optional else required_accessor
    results = {}
    for name in names:
        results[name] = accessor(name)
        logging.info(f"Resolved {var_type} variable '{name}'")
    return results


def render_table(results: dict, var_type: str) -> None:
    """Print resolved variables as a rich table."""
    table = Table(title="Environment Variables", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Value", justify="right")
    for name, value in results.items():
        shown = "<unset>" if value is None else str(value)
        table.add_row(escape(name), var_type, escape(shown))
    console.print(table)


def main(argv: list[str] | None = None):
    """
    Execute the main entry point for the env-var-parser CLI tool.

    Parses command-line arguments, configures logging, reads the requested variables and prints them.
    Exits with status 1 on the first configuration error or on interruption.
    """
    a = cli(argv)

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        results = resolve(a.names, a.var_type, a.optional)
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user")
        sys.exit(1)
    except ConfigError as exc:
        console.print(f"❌ {exc}", markup=False, soft_wrap=True)
        sys.exit(1)

    if a.json:
        console.print_json(data=results)
    else:
        render_table(results, a.var_type)


if __name__ == "__main__":
    main()
