"""
Pepito Gist - cliente mínimo para crear Gists de GitHub
"""

__version__ = "0.1.0"
