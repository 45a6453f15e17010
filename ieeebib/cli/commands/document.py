"""Citation marker substitution in documents."""

import logging
from pathlib import Path

import click

from ieeebib.citations.document import TextDocument
from ieeebib.citations.headings import section_title, update_headings
from ieeebib.citations.markers import REFERENCES_LIST_ID, CitationProcessor
from ieeebib.cli.output import print_success, read_text
from ieeebib.core.bibtex import parse as parse_bibtex

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "document", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--bib",
    "-b",
    "bibfile",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="BibTeX file with the cited entries",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the processed document here instead of stdout",
)
@click.pass_obj
def cite(ctx, document: Path, bibfile: Path, output: Path | None):
    """Replace [cite:KEY] markers in DOCUMENT and add the reference list.

    Markers are numbered by first occurrence. The reference list is
    appended to the element with id "references-list", which is created
    at the end of the document when missing.
    """
    config = ctx.config
    sink = TextDocument(read_text(document))

    update_headings(sink, config)

    numbers: dict[str, int] = {}
    if config.list_of_references:
        records = parse_bibtex(read_text(bibfile))
        sink.ensure_list(
            REFERENCES_LIST_ID,
            heading_id="references",
            heading=section_title("references", config.locale),
        )
        numbers = CitationProcessor(records, config.locale).process(sink)
    else:
        logger.info("Reference list disabled; leaving citation markers untouched")

    if output:
        output.write_text(str(sink), encoding="utf-8")
        print_success(
            ctx.console, f"Wrote {output} with {len(numbers)} cited references"
        )
    else:
        click.echo(str(sink), nl=False)
