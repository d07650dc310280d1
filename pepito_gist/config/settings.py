"""
Pydantic-based configuration management for Pepito Gist.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, ValidationError
from typing import Optional

from ..exceptions import ConfigurationError


class AppSettings(BaseSettings):
    github_token: Optional[str] = Field(None, validation_alias="GITHUB_TOKEN")
    timeout: Optional[float] = Field(None, validation_alias="PEPITO_GIST_TIMEOUT")
    log_level: str = Field("WARNING", validation_alias="PEPITO_GIST_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Construye la configuración en el momento de la llamada (entorno primero, luego .env).
    Un valor inválido se reporta como ConfigurationError.
    """
    try:
        return AppSettings()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationError(f"Configuración inválida: {fields or e}") from e


def get_github_token() -> Optional[str]:
    """Lee GITHUB_TOKEN; una cadena vacía cuenta como ausente."""
    return get_settings().github_token or None


"""
Usage:
    from pepito_gist.config.settings import get_settings, get_github_token

    # Access environment-based config
    print(get_settings().timeout)

    # Read the token when building a Gist
    token = get_github_token()
"""
