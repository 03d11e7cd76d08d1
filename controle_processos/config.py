from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    API_TITLE: str = "API Controle de Processos"
    API_DESCRIPTION: str = "API para cadastro, tramitação e acompanhamento de prazos de processos administrativos"
    API_VERSION: str = "1.0.0"
    API_PORT: int = 8535
    API_HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Data de referência para "vencendo hoje" e "atrasados"
    TIMEZONE: str = "America/Sao_Paulo"

    # Paginação
    PAGINACAO_LIMITE_PADRAO: int = 10
    PAGINACAO_LIMITE_MAXIMO: int = 100

    # Autenticação (JWE)
    JWE_SECRET_KEY: str = ""
    JWE_TOKEN_TTL: int = 28800
    AUTH_API_KEY: str = ""

    # Configurações PostgreSQL
    DATABASE_DSN: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_NAME: str = "postgres"
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_AUTO_CREATE: bool = False

    @property
    def DATABASE_URL(self) -> str:
        """Constrói a URL de conexão do PostgreSQL para asyncpg"""
        if self.DATABASE_DSN:
            return self.DATABASE_DSN
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


settings = Settings()
