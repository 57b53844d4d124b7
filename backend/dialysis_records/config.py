from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache

DEFAULT_JWT_SECRET = "replace-me-with-a-secure-secret"


class Settings(BaseSettings):
    """Application settings."""

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Database: a single URL in production, discrete parameters locally
    database_url: str = Field(default="")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="")
    db_name: str = Field(default="crm_patient_db")
    db_echo: bool = Field(default=False)

    # Auth
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_expire_seconds: int = Field(default=3600)

    # Frontend
    cors_origins: str = Field(default="*")
    public_api_base_url: str = Field(default="http://localhost:5000")

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
