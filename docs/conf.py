"""Sphinx configuration for xhtmlchardet documentation."""

import xhtmlchardet

project = "xhtmlchardet"
copyright = "2026, xhtmlchardet contributors"
author = "xhtmlchardet contributors"
release = xhtmlchardet.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
