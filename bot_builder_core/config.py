# bot_builder_core/config.py
from dataclasses import dataclass
from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv

"""
bot_builder_core.config
=======================

Gestión centralizada de configuración del servicio.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)
- La verificación de credenciales de AWS (`ensure_aws_credentials`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Las credenciales de AWS se leen UNA vez al arrancar el proceso y luego se
  pasan explícitamente a `BotCreator` / `BotUpdater`. Nunca se releen por request.
- Si faltan credenciales, la API no arranca (ver `api.main.lifespan`).
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


class ConfigurationError(RuntimeError):
    """Falta configuración obligatoria para arrancar el servicio."""


@dataclass(frozen=True)
class Settings:
    """
    Contenedor tipado de configuración global del servicio.

    Attributes
    ----------
    aws_access_key_id:
        Access key de la cuenta de AWS (variable `ACCESS_KEY_ID`).
    aws_secret_access_key:
        Secret key de la cuenta de AWS (variable `SECRET_ACCESS_KEY`).
    aws_region:
        Región donde vive el servicio de Lex (variable `AWS_REGION`).
    environment:
        Nombre del ambiente (local, staging, production). Solo informativo.
    log_level:
        Nivel de logging del proceso.
    cors_origins:
        Orígenes permitidos, separados por coma.
    """

    # AWS
    aws_access_key_id: str
    aws_secret_access_key: str
    aws_region: str

    # Proceso
    environment: str = "local"
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:3001"

    def missing_credentials(self) -> List[str]:
        """Devuelve los nombres de las variables de entorno obligatorias que faltan."""
        missing = []
        if not self.aws_access_key_id:
            missing.append("ACCESS_KEY_ID")
        if not self.aws_secret_access_key:
            missing.append("SECRET_ACCESS_KEY")
        if not self.aws_region:
            missing.append("AWS_REGION")
        return missing

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def ensure_aws_credentials(settings: Settings) -> Settings:
    """
    Verifica que las credenciales de AWS estén presentes.

    Raises
    ------
    ConfigurationError
        Si falta alguna de ACCESS_KEY_ID, SECRET_ACCESS_KEY o AWS_REGION.
    """
    missing = settings.missing_credentials()
    if missing:
        raise ConfigurationError(
            f"Faltan variables de entorno obligatorias: {', '.join(missing)}"
        )
    return settings


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - ACCESS_KEY_ID
    - SECRET_ACCESS_KEY
    - AWS_REGION
    - ENVIRONMENT (default: "local")
    - LOG_LEVEL (default: "INFO")
    - CORS_ORIGINS (default: "http://localhost:3000,http://localhost:3001")

    Notas
    -----
    - Acá NO se falla si faltan credenciales; eso lo decide quien arranca el
      proceso con `ensure_aws_credentials`.
    - En tests se puede limpiar el cache con `get_settings.cache_clear()`.
    """
    return Settings(
        aws_access_key_id=os.getenv("ACCESS_KEY_ID", ""),
        aws_secret_access_key=os.getenv("SECRET_ACCESS_KEY", ""),
        aws_region=os.getenv("AWS_REGION", ""),
        environment=os.getenv("ENVIRONMENT", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:3001"
        ),
    )
