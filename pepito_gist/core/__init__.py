"""
Módulo core de Pepito Gist
Contiene el modelo del Gist y el envío a la API de GitHub
"""

from .gist_file import GistFile
from .gist import Gist, GIST_API, USER_AGENT

__all__ = [
    'Gist',
    'GistFile',
    'GIST_API',
    'USER_AGENT',
]
