"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console

from ieeebib import __version__
from ieeebib.cli.commands import authors, cite, decode, parse, render
from ieeebib.core.models import FormatterConfig


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    config: FormatterConfig
    debug: bool = False

    @property
    def locale(self):
        return self.config.locale


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.ERROR
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=False,
        color_system=None if no_color else "auto",
    )


class IEEEBibGroup(click.Group):
    """Custom group that handles KeyboardInterrupt and unexpected errors."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            # Let Click exceptions and exits propagate with their exit codes
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[red]Error:[/red] {e}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=IEEEBibGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress warnings")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--lang",
    "-l",
    type=click.Choice(["EN", "DE"], case_sensitive=False),
    help="Output language (overrides configuration)",
)
@click.version_option(
    version=__version__, prog_name="ieeebib", message="ieeebib version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
    lang: str | None,
) -> None:
    """IEEE reference formatter.

    Parses BibTeX files and renders IEEE numbered references in English
    or German, standalone or by replacing [cite:KEY] markers in a document.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        from ieeebib.cli.config import load_config

        formatter_config = load_config(
            config, overrides={"lang": lang.upper() if lang else None}
        )
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        config=formatter_config,
        debug=debug,
    )


cli.add_command(parse)
cli.add_command(render)
cli.add_command(cite)
cli.add_command(decode)
cli.add_command(authors)


def main():
    """Console script entry point."""
    cli(prog_name="ieeebib")


if __name__ == "__main__":
    main()
