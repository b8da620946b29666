import os
from functools import lru_cache
from typing import List
from dotenv import load_dotenv

# Carga variables desde .env si existe
load_dotenv()

# Valores por defecto seguros para desarrollo (evitan fallos al importar)
DEFAULT_DATABASE_URL = os.getenv("DEFAULT_SQLALCHEMY_URL", "sqlite:///./subastas.db")
DEFAULT_CORS_ORIGINS = os.getenv("DEFAULT_CORS_ORIGINS", "http://localhost:5173")
DEFAULT_LOG_LEVEL = "INFO"

_VALORES_VERDADEROS = {"1", "true", "yes", "si", "sí", "on"}


def _get_first_env(keys: list[str], default: str) -> str:
    """Devuelve el primer valor definido entre varias claves de entorno."""
    for k in keys:
        v = os.getenv(k)
        if v:
            return v
    return default


@lru_cache()
def get_database_url() -> str:
    """Obtiene la URL de conexión de la BD principal.

    Variables aceptadas (en orden):
    - DATABASE_URL
    - SUBASTAS_DATABASE_URL
    Si ninguna está definida, usa SQLite local ./subastas.db
    """
    return _get_first_env([
        "DATABASE_URL",
        "SUBASTAS_DATABASE_URL",
    ], DEFAULT_DATABASE_URL)


@lru_cache()
def get_cors_origins() -> List[str]:
    """Orígenes permitidos para CORS, separados por comas en CORS_ORIGINS."""
    raw = _get_first_env([
        "CORS_ORIGINS",
        "FRONTEND_BASE_URL",
    ], DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache()
def get_log_level() -> str:
    return _get_first_env([
        "LOG_LEVEL",
    ], DEFAULT_LOG_LEVEL).upper()


@lru_cache()
def get_transiciones_estrictas() -> bool:
    """Si es True, las transiciones de estado validan el estado de origen.

    Por defecto las transiciones se aceptan desde cualquier estado.
    """
    valor = _get_first_env([
        "TRANSICIONES_ESTRICTAS",
    ], "false")
    return valor.strip().lower() in _VALORES_VERDADEROS
