"""Pytest configuration and fixtures for CLI tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from ieeebib.cli.main import cli


class Runner:
    """Small wrapper binding a CliRunner to the ieeebib command group."""

    def __init__(self):
        self.runner = CliRunner()

    def invoke(self, args: list[str], **kwargs):
        return self.runner.invoke(cli, args, catch_exceptions=False, **kwargs)


@pytest.fixture
def cli_runner() -> Runner:
    """CLI runner for the ieeebib command group."""
    return Runner()


@pytest.fixture
def bib_file(tmp_path: Path, sample_bibtex: str) -> Path:
    """BibTeX file with the shared sample entries."""
    path = tmp_path / "refs.bib"
    path.write_text(sample_bibtex, encoding="utf-8")
    return path


@pytest.fixture
def html_document(tmp_path: Path) -> Path:
    """HTML document citing two of the sample entries."""
    path = tmp_path / "paper.html"
    path.write_text(
        "<h1 id=\"contents\">Contents</h1>\n"
        "<p>Books [cite:knuth1997] and nets [cite:lecun2015].</p>\n"
        "<p>Repeat [cite:knuth1997], missing [cite:nobody].</p>\n",
        encoding="utf-8",
    )
    return path
