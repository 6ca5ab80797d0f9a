import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "unrestrictive-url"
copyright = "2026, unrestrictive-url contributors"
author = "unrestrictive-url contributors"
import unrestrictive_url

release = unrestrictive_url.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "yarl": ("https://yarl.aio-libs.org/en/stable/", None),
}

# Re-exports from the package root duplicate cross-references
suppress_warnings = ["ref.python"]

autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "unrestrictive-url"
