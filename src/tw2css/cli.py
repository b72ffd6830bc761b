"""Click CLI for tw2css: convert utility classes to CSS."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from tw2css.config.hierarchy import load_config_hierarchy

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(str(default_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


@click.group()
@click.version_option(package_name="tw2css")
def cli() -> None:
    """tw2css: convert Tailwind-style utility classes to plain CSS."""


@cli.command()
@click.argument("classes", nargs=-1)
@click.option(
    "--resolver",
    type=click.Choice(["auto", "static", "browser"]),
    default=None,
    help="Style resolver to use.",
)
@click.option(
    "--styles-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML style table for the static resolver.",
)
@click.option(
    "--stylesheet",
    type=click.Path(exists=True, dir_okay=False),
    help="CSS file loaded into the browser resolver's page.",
)
@click.option(
    "--browser",
    type=click.Choice(["chromium", "firefox", "webkit"]),
    default=None,
    help="Browser engine for the browser resolver.",
)
@click.option("--max-input-length", type=int, default=None, help="Reject longer input.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
@click.option("--no-highlight", is_flag=True, default=False, help="Disable syntax colouring.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def convert(
    classes: tuple[str, ...],
    resolver: str | None,
    styles_file: str | None,
    stylesheet: str | None,
    browser: str | None,
    max_input_length: int | None,
    as_json: bool,
    no_highlight: bool,
    verbose: int,
) -> None:
    """Convert CLASSES (or stdin when none are given) to CSS."""
    config = load_config_hierarchy(
        resolver=resolver,
        styles_file=styles_file,
        stylesheet=stylesheet,
        browser=browser,
        max_input_length=max_input_length,
        enable_syntax_highlighting=False if no_highlight else None,
    )
    _setup_logging(verbose, config.get("log_level", "WARNING"))

    text = " ".join(classes) if classes else click.get_text_stream("stdin").read()

    from tw2css.core import CSSProcessor, build_processor_config, build_resolver

    try:
        style_resolver = build_resolver(config)
        processor_config = build_processor_config(config)
    except (FileNotFoundError, ValueError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(2)

    async def _run() -> Any:
        async with CSSProcessor(style_resolver, config=processor_config) as processor:
            return await processor.convert(text)

    result = asyncio.run(_run())

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        error_console.print(f"[red]Error:[/red] {escape(result.error)}")
        sys.exit(1)

    _print_css(result.css, processor_config.enable_syntax_highlighting)
    for warning in result.warnings or []:
        error_console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")


def _print_css(css: str, highlight: bool) -> None:
    if not css:
        return
    if highlight:
        console.print(Syntax(css, "css", theme="monokai", background_color="default"))
    else:
        console.print(css, markup=False, highlight=False, soft_wrap=True)


@cli.command()
@click.option(
    "--styles-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML style table for the static resolver.",
)
@click.option(
    "--stylesheet",
    type=click.Path(exists=True, dir_okay=False),
    help="CSS file loaded into the browser resolver's page.",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def repl(styles_file: str | None, stylesheet: str | None, verbose: int) -> None:
    """Convert one line of classes at a time, sharing one cache.

    Commands: :status, :reset, :quit
    """
    config = load_config_hierarchy(styles_file=styles_file, stylesheet=stylesheet)
    _setup_logging(verbose, config.get("log_level", "WARNING"))

    from tw2css.core import CSSProcessor, build_processor_config, build_resolver

    try:
        style_resolver = build_resolver(config)
        processor_config = build_processor_config(config)
    except (FileNotFoundError, ValueError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(2)

    stdin = click.get_text_stream("stdin")

    async def _loop() -> None:
        async with CSSProcessor(style_resolver, config=processor_config) as processor:
            while True:
                raw = await asyncio.to_thread(stdin.readline)
                if not raw:
                    break
                line = raw.rstrip("\n")
                command = line.strip()
                if command == ":quit":
                    break
                if command == ":reset":
                    processor.reset_cache()
                    console.print("[green]Cache cleared.[/green]")
                    continue
                if command == ":status":
                    status = processor.cache_status()
                    console.print(
                        f"Cache: {status.size}/{status.capacity} entries, "
                        f"{status.hits} hits, {status.misses} misses"
                    )
                    continue

                result = await processor.convert(line)
                if result.error:
                    error_console.print(f"[red]Error:[/red] {escape(result.error)}")
                    continue
                _print_css(result.css, processor_config.enable_syntax_highlighting)
                for warning in result.warnings or []:
                    error_console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")

    asyncio.run(_loop())


@cli.command("properties")
def list_properties() -> None:
    """List the CSS properties included in output and their defaults."""
    from tw2css.pipeline.properties import DEFAULT_VALUES, PROPERTY_GROUPS

    table = Table(title="Output Properties", show_header=True)
    table.add_column("Group", style="cyan")
    table.add_column("Property")
    table.add_column("Suppressed defaults")

    for group, props in PROPERTY_GROUPS.items():
        for prop in props:
            defaults = DEFAULT_VALUES.get(prop)
            table.add_row(group, prop, ", ".join(sorted(defaults)) if defaults else "-")

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
