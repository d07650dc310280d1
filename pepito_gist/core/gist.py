"""
Creación de Gists en GitHub.

Un Gist agrupa uno o más GistFile, se serializa a un JSON con claves
ordenadas y se envía una única vez con POST a la API de GitHub.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional

import requests

from ..config.settings import get_github_token, get_settings
from ..exceptions import (
    ApiError,
    ConfigurationError,
    GistAlreadySubmittedError,
    NetworkError,
)
from .gist_file import GistFile

logger = logging.getLogger(__name__)

GIST_API = "https://api.github.com/gists"
GITHUB_TOKEN = "GITHUB_TOKEN"
USER_AGENT = "Pepito Gist"


def _mask(val: Optional[str]) -> str:
    if not val:
        return ""
    s = str(val)
    return ("*" * max(0, len(s) - 4)) + s[-4:]


class Gist:
    """Petición de creación de un Gist (uso único)"""

    def __init__(
        self,
        public: bool,
        anonymous: bool,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        timeout: Optional[float] = None,
    ):
        """
        El token y el timeout por defecto se leen de la configuración en cada
        construcción (GITHUB_TOKEN, PEPITO_GIST_TIMEOUT).

        Raises:
            ConfigurationError: si falta el token sin ser anónimo, o si la
                configuración tiene valores inválidos.
        """
        self.public = public
        self.anonymous = anonymous
        self.files: List[GistFile] = []
        self.submitted = False

        if anonymous:
            self.token = ""
        else:
            provider = token_provider or get_github_token
            token = provider()
            if not token:
                raise ConfigurationError(f"Falta la variable de entorno {GITHUB_TOKEN}")
            self.token = token

        self.timeout = timeout if timeout is not None else get_settings().timeout

    def is_empty(self) -> bool:
        return not self.files

    def add_file(self, gist_file: GistFile) -> None:
        self.files.append(gist_file)

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        if not self.anonymous:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def to_json(self) -> Dict[str, Any]:
        files: Dict[str, Any] = {}
        for f in self.files:
            # Last one wins when two paths share the same basename.
            if f.key in files:
                logger.warning(f"'{f.name}' sobrescribe otro archivo con el nombre '{f.key}'")
            files[f.key] = f.to_json()
        return {"public": self.public, "files": files}

    def serialize(self) -> str:
        """JSON compacto (UTF-8 sin escapes \\uXXXX) con las claves ordenadas en todos los niveles."""
        return json.dumps(self.to_json(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    def create(self) -> str:
        """Envía el Gist a GitHub y devuelve el cuerpo de la respuesta.

        Returns:
            El cuerpo de la respuesta 201 tal cual.

        Raises:
            GistAlreadySubmittedError: si este Gist ya se envió antes.
            NetworkError: si no se obtuvo respuesta (DNS, TLS, conexión, timeout).
            ApiError: si la API respondió con un estado distinto de 201.
        """
        if self.submitted:
            raise GistAlreadySubmittedError()
        self.submitted = True

        body = self.serialize().encode("utf-8")
        headers = self.headers

        dbg_headers = dict(headers)
        if "Authorization" in dbg_headers:
            dbg_headers["Authorization"] = "Bearer " + _mask(self.token)
        logger.debug(f"POST {GIST_API}")
        logger.debug(f"Headers: {json.dumps(dbg_headers, ensure_ascii=False)}")
        logger.debug(f"Payload: {len(self.files)} archivo(s), {len(body)} bytes")

        try:
            r = requests.post(
                GIST_API,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Error de red al contactar {GIST_API}: {e}") from e

        logger.debug(f"Respuesta HTTP {r.status_code}")
        if r.status_code == 201:
            return r.text

        logger.debug(f"Cuerpo de error: {r.text[:500]}")
        raise ApiError(r.status_code, r.text)
