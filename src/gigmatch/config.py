"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py -> gigmatch/ -> src/ -> raíz del proyecto
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase (solo lo necesitan los repositorios)
    supabase_url: Optional[str] = Field(None, description="URL del proyecto Supabase")
    supabase_key: Optional[str] = Field(None, description="Anon key de Supabase")
    supabase_service_key: Optional[str] = Field(
        None, description="Service role key para operaciones admin"
    )

    # Tablas
    jobs_table: str = Field("job_postings", description="Tabla de jobs publicados")
    users_table: str = Field("users", description="Tabla de usuarios/freelancers")

    # Matching
    default_match_limit: int = Field(
        10, ge=1, description="Cantidad de matches devueltos si no se pide limit"
    )
    max_match_limit: int = Field(
        100, ge=1, description="Tope superior para el parámetro limit"
    )
    match_timeout_seconds: float = Field(
        10.0, gt=0, description="Timeout del pipeline fetch + score + sort"
    )

    # HTTP
    http_listen: str = Field("0.0.0.0", description="Host de escucha del servidor")
    http_port: int = Field(8080, description="Puerto del servidor HTTP")

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()
