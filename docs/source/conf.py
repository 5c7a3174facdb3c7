# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

# -- Project information -----------------------------------------------------

project = "treeload"
copyright = "2025, treeload developers"
author = "treeload developers"

# Get version from the package
try:
    from treeload.version import __version__

    release = __version__
    version = __version__
except ImportError:
    release = "1.0.0"
    version = "1.0.0"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_rtd_theme",
]

# Docstrings follow the numpy convention
napoleon_google_docstring = False
napoleon_numpy_docstring = True

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
}

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"

master_doc = "index"
