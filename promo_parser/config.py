import os

from pydantic import BaseModel, Field


def _require_env(name: str) -> str:
    """
    Fetch a required environment variable or raise a clear error.
    """

    value = os.getenv(key=name)
    if value is None or value == "":
        raise EnvironmentError(
            f"Environment variable {name} is required but not set."
        )
    return value


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(key=name, default=default).lower() in {"1", "true", "yes", "on"}


class DatabaseSettings(BaseModel):
    """
    Database connection settings loaded from environment variables.
    """

    username: str = Field(default_factory=lambda: _require_env("DB_USER"))
    password: str = Field(default_factory=lambda: _require_env("DB_PASSWORD"))
    host: str = Field(default_factory=lambda: _require_env("DB_HOST"))
    port: int = Field(default_factory=lambda: int(_require_env("DB_PORT")))
    name: str = Field(default_factory=lambda: _require_env("DB_NAME"))
    migrate_on_startup: bool = Field(
        default_factory=lambda: _env_flag("DB_MIGRATE_ON_STARTUP", "false")
    )

    def url(self) -> str:
        """
        Build an asynchronous PostgreSQL URL for application use.
        """

        return (
            "postgresql+asyncpg://"
            f"{self.username}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}"
        )

    def sync_url(self) -> str:
        """
        Build a synchronous PostgreSQL URL for migration tooling.
        """

        return (
            "postgresql+psycopg://"
            f"{self.username}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}"
        )


class PromotionSettings(BaseModel):
    """
    Defaults applied while validating promotion documents.
    """

    default_title: str = Field(
        default_factory=lambda: os.getenv(
            "PROMOTION_DEFAULT_TITLE", "โปรโมชัน BYD Metromobile"
        )
    )
    slug_max_suffix: int = Field(
        default_factory=lambda: int(os.getenv("SLUG_MAX_SUFFIX", "9")),
        ge=2,
    )


class Settings(BaseModel):
    """
    Root application settings.
    """

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    promotions: PromotionSettings = Field(default_factory=PromotionSettings)


settings = Settings()
