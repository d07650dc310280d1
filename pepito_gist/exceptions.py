"""
Jerarquía de excepciones para Pepito Gist.
Los errores de lectura local (OSError, UnicodeDecodeError) no se envuelven:
llegan al llamador tal cual.
"""

from typing import Optional


class PepitoGistException(Exception):
    """Base class for all Pepito Gist exceptions."""
    pass


class ConfigurationError(PepitoGistException):
    """Raised when the GitHub token is missing and the gist is not anonymous."""
    pass


class NetworkError(PepitoGistException):
    """
    Raised when no response could be obtained from the API
    (DNS, TLS, connection reset, timeout).
    """
    pass


class ApiError(PepitoGistException):
    """Raised when the API answered with a status other than 201 Created."""
    def __init__(self, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = "API error"
        else:
            message = f"API error (HTTP {status_code})"
        super().__init__(message)


class GistAlreadySubmittedError(PepitoGistException):
    """Raised when create() is called on a gist that was already sent."""
    def __init__(self, detail: str = "El Gist ya fue enviado"):
        super().__init__(detail)


class GistFileError(PepitoGistException):
    """Raised when a GistFile is populated more than once."""
    pass
