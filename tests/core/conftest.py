"""Shared fixtures for core module tests."""

import pytest

from ieeebib.core.models import BibRecord


@pytest.fixture
def article_record() -> BibRecord:
    """Article with every field the article branch uses."""
    return BibRecord(
        key="lecun2015",
        type="article",
        fields={
            "author": "LeCun, Yann and Bengio, Yoshua and Hinton, Geoffrey",
            "title": "Deep Learning",
            "journal": "Nature",
            "volume": "521",
            "number": "7553",
            "pages": "436–444",
            "month": "may",
            "year": "2015",
        },
    )


@pytest.fixture
def escaped_titles() -> list[tuple[str, str]]:
    """Pairs of escaped field text and expected display text."""
    return [
        (r"M\"{u}ller", "Müller"),
        (r"J\"org", "Jörg"),
        (r"\"{A}rger", "Ärger"),
        (r"Stra\ss{}e", "Straße"),
        (r"{\ss}", "ß"),
        (r"Gru\"{s}", "Gruß"),
        (r"Fran\c{c}ois", "François"),
        (r"Espa\~na", "España"),
        (r"Caf\'e", "Café"),
        (r"\`{a} la carte", "à la carte"),
        (r"\'Ecole", "École"),
        (r"C{\ae}sar", "Cæsar"),
        (r"{\OE}uvre", "Œuvre"),
    ]
