import os
import sys
sys.path.insert(0, os.path.abspath('../..'))


project = 'Contact Book'
copyright = '2025, Contact Book authors'
author = 'Contact Book authors'

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.napoleon']

templates_path = ['_templates']
exclude_patterns = []


html_theme = 'alabaster'
html_static_path = ['_static']
