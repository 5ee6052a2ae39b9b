"""Application configuration settings."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class DatabaseSettings(BaseModel):
    """Connection parameters for the relational database."""

    host: str = "localhost"
    port: int = Field(default=5432, gt=0)
    user: str = "postgres"
    password: str = ""
    dbname: str = "app"
    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the individual connection fields",
    )

    def sqlalchemy_url(self) -> URL:
        """Return the SQLAlchemy URL used to create the engine."""

        if self.url:
            return make_url(self.url)
        return URL.create(
            "postgresql+psycopg2",
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.dbname,
        )


class RedisSettings(BaseModel):
    """Connection parameters for the optional Redis cache."""

    enabled: bool = False
    host: str = "localhost"
    port: int = Field(default=6379, gt=0)
    db: int = Field(default=0, ge=0)


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8080, gt=0)
    log_level: str = "info"


class AuthSettings(BaseModel):
    jwt_secret: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    token_expiry: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        env_nested_delimiter="__",
        extra="ignore",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    auth: AuthSettings


def load_settings() -> Settings:
    """Build the settings from the environment and the ``.env`` file."""

    return Settings()


__all__ = [
    "AuthSettings",
    "DatabaseSettings",
    "RedisSettings",
    "ServerSettings",
    "Settings",
    "load_settings",
]
