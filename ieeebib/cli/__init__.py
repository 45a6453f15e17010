"""ieeebib CLI.

Command-line interface for parsing BibTeX files and rendering IEEE
references. Built with Click and Rich.
"""

from ieeebib.cli.main import cli

__all__ = ["cli"]
