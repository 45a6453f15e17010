"""Commands working directly on bibliography records and field text.

Provides commands for listing parsed records, rendering IEEE references and
decoding single field values.
"""

from pathlib import Path

import click
import msgspec

from ieeebib.citations.styles import render_bibliography
from ieeebib.cli.output import print_table, print_text, print_warning, read_text
from ieeebib.core.bibtex import parse as parse_bibtex
from ieeebib.core.latex import decode as decode_text
from ieeebib.core.names import format_authors


@click.command()
@click.argument("bibfile", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_obj
def parse(ctx, bibfile: Path, output_format: str):
    """List the records parsed from BIBFILE."""
    records = parse_bibtex(read_text(bibfile))

    if output_format == "json":
        click.echo(msgspec.json.encode(list(records.values())).decode("utf-8"))
        return

    if not records:
        ctx.console.print("[yellow]No entries found[/yellow]")
        return

    rows = [
        [record.key, record.type, record.get("title", ""), str(len(record.fields))]
        for record in records.values()
    ]
    print_table(
        ctx.console,
        ["Key", "Type", "Title", "Fields"],
        rows,
        title=f"{len(records)} entries in {bibfile.name}",
    )


@click.command()
@click.argument("bibfile", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("keys", nargs=-1)
@click.pass_obj
def render(ctx, bibfile: Path, keys: tuple[str, ...]):
    """Render IEEE references for BIBFILE.

    Entries are numbered in file order, or in the order of KEYS when given.
    """
    records = parse_bibtex(read_text(bibfile))

    selected = list(keys) if keys else list(records)
    missing = [key for key in selected if key not in records]
    for key in missing:
        print_warning(ctx.console, f"Entry not found: {key}")

    for reference in render_bibliography(records, selected, ctx.locale):
        print_text(ctx.console, reference)

    if missing:
        click.get_current_context().exit(1)


@click.command()
@click.argument("text")
def decode(text: str):
    """Decode LaTeX escape markup in TEXT."""
    click.echo(decode_text(text))


@click.command()
@click.argument("text")
@click.pass_obj
def authors(ctx, text: str):
    """Format a BibTeX author field."""
    click.echo(format_authors(decode_text(text), ctx.locale))
