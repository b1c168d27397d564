# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath('../..'))

from bernpoly import __version__  # noqa: E402

# -- Project information -----------------------------------------------------

project = 'bernpoly'
version = __version__  # Short X.Y version.
release = version  # Full version, including alpha/beta/rc tags.

# -- General configuration ---------------------------------------------------

extensions = ['sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              'sphinx.ext.napoleon',
              'sphinx.ext.mathjax',
              'sphinx.ext.todo',]

templates_path = ['_templates']
exclude_patterns = []

autodoc_default_options = {
    'members': True,
    'special-members': True,
    'exclude-members': '__dict__, __hash__, __module__, __slots__, '
                       '__weakref__, __dataclass_fields__, '
                       '__dataclass_params__'}

todo_include_todos = True

# -- Options for HTML output -------------------------------------------------

html_theme = 'pydata_sphinx_theme'
html_static_path = ['_static']
