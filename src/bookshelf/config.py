"""
Configuration management for Bookshelf
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True  # Serve the GraphiQL exploration page

    # Seed data
    seed_on_startup: bool = True
    seed_path: str | None = None  # YAML or JSON file replacing the built-in seed

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        graphql_path=settings.graphql_path,
    )
