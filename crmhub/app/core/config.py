"""
CRMHub Core API Configuration
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "CRMHub Core API"
    version: str = "0.3.0"
    debug: bool = False
    environment: str = "production"

    # API Configuration
    api_prefix: str = "/api"

    # Database
    database_url: str = "sqlite+aiosqlite:///./crm.db"
    database_echo: bool = False

    # Seed data
    seed_sample_data: bool = True
    seed_admin_username: str = "admin"
    seed_admin_password: str = "admin123"
    seed_admin_department: str = "总部"

    # Identity returned by /me until real authentication is wired in
    current_username: str = "admin"

    # Monitoring
    prometheus_enabled: bool = True
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
