"""Sphinx configuration for encdetect documentation."""

import encdetect

project = "encdetect"
copyright = "2026, encdetect contributors"
author = "encdetect contributors"
release = encdetect.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
