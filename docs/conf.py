# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

# Flat layout: the package sits beside docs/, not under src/.
sys.path.insert(0, os.path.abspath('..'))

from pymatrix import __version__  # noqa: E402

project = 'pymatrix'
copyright = '2026, pymatrix developers'
author = 'pymatrix developers'
version = __version__
release = __version__

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

# Napoleon settings (modules mix Google and NumPy docstring styles)
napoleon_google_docstrings = True
napoleon_numpy_docstrings = True
napoleon_include_init_with_doc = True

# Autodoc settings
autodoc_member_order = 'bysource'
autodoc_typehints = 'description'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
    # Set to None on Matrix; nothing to document.
    'exclude-members': '__iter__, __array_ufunc__, __hash__',
}
autodoc_type_aliases = {
    'ArrayLike': 'numpy.typing.ArrayLike',
    'NDArray': 'numpy.typing.NDArray',
}
add_module_names = False

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store',
                    'DESIGN.md', 'SPEC_FULL.md', 'TRIAGE.md',
                    'REVIEW_FINDINGS.md']

# -- Options for HTML output -------------------------------------------------

html_theme = 'furo'
html_title = f'pymatrix {release}'

# -- Intersphinx configuration -----------------------------------------------

# fractions and decimal element types resolve through the python inventory.
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
}
