"""esm-loader CLI - inspect how specifiers will be resolved.

Resolution itself runs inside the host engine; these commands show the
configuration the resolver would use: search bases, probe candidates and
specifier classification.
"""

import logging
import sys

import click
import yaml
from pydantic import ValidationError
from rich.table import Table

from .console import console
from .context import build_search_path
from .logging_setup import init_json_logging
from .settings import LoaderSettings
from .settings import load_settings
from .specifiers import SpecifierKind
from .specifiers import classify
from .specifiers import parse_scheme
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context):
    """Inspect module resolution settings."""
    try:
        settings = load_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {escape_markup(format_error_message(e, include_type=False))}")
        sys.exit(1)

    if settings.log_path:
        init_json_logging(settings.log_path, settings.log_level)

    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@cli.command(name="search-path")
@click.pass_obj
def search_path_cmd(settings: LoaderSettings):
    """Show search bases in probe order."""
    search_path = build_search_path(settings)

    if not len(search_path):
        console.print("[yellow]Search path is empty; bare specifiers cannot resolve.[/yellow]")
        return

    table = Table(title="Module Search Path", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim")
    table.add_column("Base URI", style="green")
    for index, base in enumerate(search_path, start=1):
        table.add_row(str(index), escape_markup(base))
    console.print(table)


@cli.command(name="candidates")
@click.argument("specifier")
@click.pass_obj
def candidates_cmd(settings: LoaderSettings, specifier: str):
    """Show the URIs probed for a bare SPECIFIER."""
    kind = classify(specifier)
    if kind is not SpecifierKind.BARE:
        console.print(f"[red]Not a bare specifier:[/red] {escape_markup(specifier)} ({kind.value})")
        sys.exit(1)

    for candidate in build_search_path(settings).candidate_uris(specifier):
        console.print(escape_markup(candidate))


@cli.command(name="classify")
@click.argument("specifier")
def classify_cmd(specifier: str):
    """Show how SPECIFIER will be resolved."""
    kind = classify(specifier)
    console.print(f"[bold]Kind:[/bold] {kind.value}")
    if kind is SpecifierKind.URI:
        console.print(f"[bold]Scheme:[/bold] {parse_scheme(specifier)}")


@cli.command(name="config")
@click.pass_obj
def config_cmd(settings: LoaderSettings):
    """Show effective settings."""
    click.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())


def main():
    cli()


if __name__ == "__main__":
    main()
