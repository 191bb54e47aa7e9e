
"""Configurações Pydantic Settings para o gerenciador de carrinho."""
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

class Settings(BaseSettings):
    """Configurações da aplicação. Carrega de env e .env.

    Todas as variáveis usam o prefixo RS_ (ex: RS_API_BASE_URL).
    """
    model_config = SettingsConfigDict(env_file=".env", env_prefix="RS_", case_sensitive=False)

    # Flask
    flask_debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # API de produtos/estoque
    api_base_url: str = Field(default="http://localhost:3333", description="URL base da API de produtos e estoque")
    http_timeout_s: float = Field(default=10)

    # Persistência
    database_url: str = Field(default="sqlite:///rocketshoes_cart.db")
    db_auto_create: bool = Field(default=True, description="Cria tabelas via metadata ao subir (sem Alembic)")
    storage_key: str = Field(default="@RocketShoes:cart", description="Chave única do snapshot do carrinho")

    # Comportamento
    notify_on_increment: bool = Field(default=False, description="Notifica sucesso também ao incrementar item existente")

    # Logs
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v
