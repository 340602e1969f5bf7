"""
Command-line interface for emitting C# source from model documents.

Examples:
  cs-emitter model.json
  cs-emitter model.json -o Generated/Player.cs --namespace Game.Data
  cs-emitter model.json --config emitter.json --header
  cs-emitter model.json --check
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, EmitterConfig, get_config_manager, load_config
from .core.emitter import emit_source
from .core.templates import TemplateError
from .logging_config import configure_logging, get_logger
from .model import ModelError, build_file_from_model
from .utils import ModelLoaderError, load_model_file

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cs-emitter",
        description="Emit C# source files from JSON model documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cs-emitter model.json
  cs-emitter model.json -o Generated/Player.cs --namespace Game.Data
  cs-emitter model.json --config emitter.json --header
  cs-emitter model.json --check
        """.strip(),
    )

    parser.add_argument("model", help="JSON model document")

    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: print to console)",
    )

    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for emission"
    )

    parser.add_argument(
        "--namespace",
        metavar="NS",
        help="Namespace wrapping the emitted types (overrides model and config)",
    )

    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument(
        "--header",
        dest="header",
        action="store_true",
        default=None,
        help="Add an auto-generated banner at the top of the file",
    )
    header_group.add_argument(
        "--no-header",
        dest="header",
        action="store_false",
        help="Don't add the auto-generated banner",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the model and report errors without emitting code",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging and emission metadata",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _build_config(args: argparse.Namespace) -> EmitterConfig:
    """Build configuration from CLI arguments."""
    overrides = {}

    if args.header is not None:
        overrides["add_header"] = args.header

    if args.output:
        overrides["output_file"] = args.output

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _load_model(model_path: str) -> dict:
    try:
        return load_model_file(model_path)
    except FileNotFoundError as e:
        raise CLIError(str(e)) from e
    except ModelLoaderError as e:
        raise CLIError(f"Failed to load model: {e}") from e


def _print_errors(errors) -> None:
    table = Table(
        title="Validation Errors",
        box=box.ROUNDED,
        title_style="bold red",
    )
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Error", style="bold red")
    table.add_column("Message")

    for index, error in enumerate(errors, 1):
        table.add_row(str(index), type(error).__name__, str(error))

    console.print()
    console.print(table)


def _print_metadata(metadata: dict) -> None:
    metadata_table = Table(
        title="Emission Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def run(args: argparse.Namespace) -> int:
    """
    Execute an emission request.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    config = _build_config(args)
    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    model = _load_model(args.model)
    logger.debug(f"Loaded model {args.model} with {len(model.get('types') or [])} type(s)")

    try:
        file_builder = build_file_from_model(
            model,
            config,
            path=args.output,
            source_name=Path(args.model).name,
        )
    except (ModelError, TemplateError) as e:
        raise CLIError(f"Invalid model: {e}") from e

    if args.namespace:
        file_builder.with_namespace(args.namespace)

    if args.check:
        errors = file_builder.validate()
        if errors:
            _print_errors(errors)
            return 1
        console.print(
            f"[green]✓[/green] {len(file_builder.containers)} type(s) in "
            f"[cyan]{args.model}[/cyan] are valid"
        )
        return 0

    result = emit_source(file_builder)
    if not result.success:
        console.print(f"[red]✗ Code emission failed:[/red] {result.error_message}")
        _print_errors(result.errors)
        return 1

    if args.output:
        try:
            output_path = file_builder.save()
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {args.output}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated C# code saved to [cyan]{output_path}[/cyan]"
        )
    else:
        console.print(
            Panel(
                Syntax(result.code, "csharp", theme="monokai"),
                title=f"📄 {Path(args.model).name}",
                border_style="green",
            )
        )

    if args.verbose and result.metadata:
        _print_metadata(result.metadata)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]👋 Interrupted[/yellow]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
