from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from the environment and .env"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=3001)
    api_reload: bool = Field(default=False)
    debug: bool = Field(default=False)

    # Database settings. DATABASE_URL wins over the individual DB_* fields.
    database_url: Optional[str] = Field(default=None)
    db_driver: str = Field(default="postgresql+psycopg2")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="exofinder")
    db_password: str = Field(default="exofinder")
    db_name: str = Field(default="exofinder")

    # Log settings
    log_level: str = Field(default="info")

    # CORS settings
    cors_origins: list[str] = Field(default=["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Catalog settings
    page_size: int = Field(default=50, ge=1)
    seed_csv_path: str = Field(default="exoplanets.csv")

    # Development settings
    enable_docs: bool = Field(default=True)
    enable_redoc: bool = Field(default=True)

    def get_database_url(self) -> str:
        """Returns the SQLAlchemy URL for the catalog database"""
        if self.database_url:
            return self.database_url
        return (
            f"{self.db_driver}://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    def get_cors_config(self) -> dict:
        """Returns the CORS configuration"""
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": self.cors_allow_credentials,
            "allow_methods": self.cors_allow_methods,
            "allow_headers": self.cors_allow_headers,
        }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency to get settings"""
    return settings
