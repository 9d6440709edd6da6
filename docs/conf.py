# Configuration file for the Sphinx documentation builder.
#
# For a full list of options see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

# Do not do sys.path surgery
# Instead, cpinspect package should be pip-installed in the python environment

# -- Project information -----------------------------------------------------

project = 'cpinspect'
copyright = '2026, cpinspect developers'
author = 'cpinspect developers'

try:
   from importlib import metadata
   release = metadata.version('cpinspect')
except Exception:
   release = '0.0.0-version-not-available'

# Take major/minor
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------

autoclass_content = "class"  # Alternatively, "both" to include init method
autosummary_generate = True  # Make _autosummary files and include them
autosummary_generate_overwrite = True

napoleon_use_rtype = False  # More legible
autodoc_member_order = 'bysource'

extensions = [
   'sphinx.ext.autodoc',
   'sphinx.ext.autosummary',
   'sphinx.ext.napoleon',
   'sphinx.ext.viewcode',
   'autoclasstoc',
]

templates_path = ['_templates']

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '**.ipynb_checkpoints']

# -- Options custom autoclasstoc sections ------------------------------------

# See https://autoclasstoc.readthedocs.io/en/latest/advanced_usage.html

from autoclasstoc import PublicMethods


class CellMethods(PublicMethods):
   key = "cell-methods"
   title = "Per Cell Methods:"

   def predicate(self, name, attr, meta):
      return super().predicate(name, attr, meta) and name.startswith('cell_')


class OtherMethods(PublicMethods):
   key = "other-methods"
   title = "Methods:"

   def predicate(self, name, attr, meta):
      return super().predicate(name, attr, meta) and not name.startswith('cell_')


autoclasstoc_sections = [
   "public-attrs",
   "cell-methods",
   "other-methods",
]

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
