"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate configuration lookups for each test.

    Prevents a user or project config file, or an exported IEEEBIB_LANG,
    from changing the output under test.
    """
    monkeypatch.delenv("IEEEBIB_LANG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_bibtex() -> str:
    """Sample BibTeX content covering every rendering branch."""
    return r"""
% A comment line outside of any entry
@string{nat = "Nature"}

@article{lecun2015,
    author  = {LeCun, Yann and Bengio, Yoshua and Hinton, Geoffrey},
    title   = {Deep Learning},
    journal = {Nature},
    volume  = {521},
    number  = {7553},
    pages   = {436--444},
    month   = may,
    year    = 2015
}

@InProceedings{lee2024,
    author    = "Lee, Kim and Park, Jin",
    title     = "Neural Architecture Search",
    booktitle = {Proc. ICML},
    address   = {Vienna, Austria},
    pages     = {123--134},
    year      = {2024}
}

@book{knuth1997,
    author    = {Knuth, Donald E.},
    title     = {The Art of Computer Programming},
    publisher = {Addison-Wesley},
    edition   = {3},
    address   = {Boston},
    year      = {1997}
}

@techreport{mueller2001,
    author      = {M\"{u}ller, J\"org},
    title       = {Stra\ss{}enbahnen in M\"unchen},
    institution = {TU M\"{u}nchen},
    number      = {TR-42},
    year        = {2001}
}

@misc{mdn,
    title        = {{MDN} Web Docs},
    howpublished = {Website},
    url          = {https://developer.mozilla.org},
    year         = {2024},
    urldate      = {2024-01-15}
}
"""
