"""
Command-line interface for structbridge.

Reads a Go struct or TypeScript interface from a file or stdin and writes
the converted declaration to stdout or a file.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .converter import ACTION_ADD_TAGS, ConversionResult, Converter
from .core.classifier import EmptyInputError
from .core.config import ConfigError, load_config
from .logging_config import get_logger, setup_logging
from .registry import get_notation_info, list_supported_notations

logger = get_logger(__name__)

# Status messages go to stderr; stdout carries only converted code
console = Console(stderr=True)

SYNTAX_LEXERS = {"go": "go", "typescript": "typescript"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="structbridge",
        description="Convert a Go struct to a TypeScript interface and back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  structbridge user.go
  pbpaste | structbridge --no-tag-check
  structbridge models.ts --output models.go
  structbridge user.go --template-dir ./templates
  structbridge --list-notations
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="File holding the declaration")
    # Explicit form of the default: stdin is read whenever no file is given
    input_group.add_argument(
        "--stdin",
        action="store_true",
        help="Read the declaration from standard input (default when no file is given)",
    )

    parser.add_argument("--output", "-o", metavar="FILE", help="Output file (default: stdout)")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--template-dir",
        metavar="DIR",
        help="Directory with struct.go.j2 / interface.ts.j2 overriding the built-in templates",
    )
    parser.add_argument(
        "--no-tag-check",
        action="store_true",
        help="Convert Go structs even when fields lack JSON tags",
    )
    parser.add_argument(
        "--export", action="store_true", help="Emit `export interface` for TypeScript"
    )
    parser.add_argument(
        "--pretty", action="store_true", help="Show the result with syntax highlighting"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show conversion metadata"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--list-notations",
        action="store_true",
        help="List supported notations and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise CLIError(f"File not found: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to read {path}: {e}") from e
    return sys.stdin.read()


def _build_config(args: argparse.Namespace):
    overrides = {}
    if args.no_tag_check:
        overrides["enable_json_tag_check"] = False
    if args.export:
        overrides["ts_export"] = True
    if args.template_dir:
        overrides["template_dir"] = args.template_dir
    return load_config(custom_config=overrides, config_file=args.config)


def _list_notations() -> int:
    table = Table(title="Supported Notations", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Notation", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Parser", style="dim")
    table.add_column("Emitter", style="dim")
    table.add_column("Aliases", style="blue")

    for notation in list_supported_notations():
        info = get_notation_info(notation)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            info["name"], info["file_extension"], info["parser"], info["emitter"], aliases
        )

    console.print(table)
    return 0


def _report_error(result: ConversionResult) -> int:
    if result.error_kind == EmptyInputError.kind:
        console.print(f"[yellow]⚠ {result.error}[/yellow]")
    else:
        console.print(f"[red]✗ {result.error}[/red]")
    return 1


def _write_output(result: ConversionResult, args: argparse.Namespace) -> int:
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.result + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(f"[green]✓[/green] Saved to [cyan]{output_path}[/cyan]")
    elif args.pretty:
        lexer = SYNTAX_LEXERS.get(result.metadata.get("target", ""), "text")
        Console().print(Syntax(result.result, lexer, theme="monokai"))
    else:
        sys.stdout.write(result.result + "\n")

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="Conversion Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print(metadata_table)

    if result.warnings:
        console.print("[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level, console=console)

    if args.list_notations:
        return _list_notations()

    try:
        config = _build_config(args)
        text = _read_input(args)
    except (CLIError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("%s", e)
        return 1

    result = Converter(config).convert(text)
    if not result.success:
        return _report_error(result)

    if result.metadata.get("action") == ACTION_ADD_TAGS:
        console.print(
            "[yellow]Added missing JSON tags; run again to convert.[/yellow]"
        )

    return _write_output(result, args)


if __name__ == "__main__":
    sys.exit(main())
