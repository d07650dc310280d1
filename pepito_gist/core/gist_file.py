"""
Archivo individual de un Gist: nombre + contenido en memoria.
"""

import logging
import sys
from typing import Any, Dict, Optional, TextIO

from ..exceptions import GistFileError

logger = logging.getLogger(__name__)


class GistFile:
    """Un archivo con nombre cuyo contenido se carga una sola vez"""

    def __init__(self, name: str):
        self.name = name
        self.contents = ""
        self._loaded = False

    @property
    def key(self) -> str:
        """Nombre usado en el payload: lo que queda tras la última '/'"""
        return self.name.split("/")[-1]

    def _check_not_loaded(self):
        if self._loaded:
            raise GistFileError(f"El archivo '{self.name}' ya tiene contenido")

    def read_file(self) -> None:
        """Lee el archivo `name` completo como texto UTF-8, sin traducir saltos de línea.

        Los errores de E/S (archivo inexistente, permisos, codificación
        inválida) se propagan sin modificar.
        """
        self._check_not_loaded()
        with open(self.name, "r", encoding="utf-8", newline="") as f:
            self.contents = f.read()
        self._loaded = True
        logger.debug(f"Leído {self.name} ({len(self.contents)} caracteres)")

    def read_stdin(self, stream: Optional[TextIO] = None) -> None:
        """Lee STDIN (o `stream`) hasta EOF."""
        self._check_not_loaded()
        stream = stream if stream is not None else sys.stdin
        self.contents = stream.read()
        self._loaded = True
        logger.debug(f"Leídos {len(self.contents)} caracteres desde STDIN para {self.name}")

    def to_json(self) -> Dict[str, Any]:
        return {"content": self.contents}

    def __repr__(self) -> str:
        return f"GistFile(name={self.name!r}, size={len(self.contents)})"
