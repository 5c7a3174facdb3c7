"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import os

import pytest


@pytest.fixture(name="write_file")
def fixture_write_file(tmp_path):
    """Returns a function which writes a text file under the temporary path.

    Parameters
    ----------
    tmp_path : str
       Generic pytest fixture used to handle temporary test files
    """

    def write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

        return str(path)

    return write


@pytest.fixture(name="real")
def fixture_real():
    """Returns a function which canonicalizes paths the way the resolver does.

    Temporary directories may live behind symbolic links, so expected paths
    must be canonicalized before being compared to the diagnostics.
    """
    return os.path.realpath
