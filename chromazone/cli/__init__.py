"""CLI package for chromazone."""

from __future__ import annotations

import sys

import click

from chromazone import __version__
from chromazone.cli.utils import (
    COLOR_CHOICES,
    available_styles,
    build_pattern_set,
    get_stdin,
    print_error,
    read_lines,
    render_line,
    resolve_color_system,
    setup_logging,
)
from chromazone.config.parsers import expand_path
from chromazone.core.errors import ChromazoneError


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="cz")
@click.option(
    "--style",
    "-s",
    metavar="NAME",
    help="Named style: a built-in such as 'diff' or a section of the styles file",
)
@click.option(
    "--match",
    "-m",
    "matches",
    nargs=2,
    multiple=True,
    metavar="PATTERN DESCRIPTION",
    help="Highlight PATTERN with DESCRIPTION, e.g. -m 'ERROR.*' red,bold",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Styles file to use instead of $XDG_CONFIG_HOME/chromazone/chromazone.styles",
)
@click.option(
    "--color",
    type=click.Choice(COLOR_CHOICES),
    default="always",
    show_default=True,
    help="When to emit terminal styling",
)
@click.option("--list", "-l", "list_styles", is_flag=True, help="List available styles")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    style: str | None,
    matches: tuple[tuple[str, str], ...],
    config_path: str | None,
    color: str,
    list_styles: bool,
    verbose: bool,
) -> None:
    """Highlight regex matches in text read from stdin.

    \b
    Examples:
      diff -u old new | cz -s diff
      tail -f app.log | cz -m 'ERROR.*' red,bold -m 'WARN' yellow

    Descriptions are comma-separated colors (black, blue, cyan, green,
    magenta/purple, red, white, yellow), background colors prefixed with
    'b:' (b:red), and effects (bold, italic, strike, underline).
    """
    setup_logging(verbose)
    path = expand_path(config_path) if config_path else None

    if style is None and not matches and not list_styles:
        click.echo(ctx.get_help())
        return

    try:
        if list_styles:
            for name, origin in available_styles(path):
                click.echo(f"{name}\t{origin}")
            return

        pattern_set = build_pattern_set(style, matches, path)
        color_system = resolve_color_system(color)
        for line in read_lines(get_stdin()):
            click.echo(
                render_line(line, pattern_set, color_system),
                color=color_system is not None,
            )
    except ChromazoneError as e:
        print_error(e)
        raise SystemExit(1) from None


def main() -> None:
    """Entry point for the CLI."""
    # Keep non-ASCII text intact when stdout is a pipe
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    cli()


__all__ = ["cli", "main"]
