from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Posts
    POSTS_DIR: str = "post"
    POST_EXTENSION: str = ".md"
    ABRIDGE_LIMIT: int = 1000

    # Site
    SITE_TITLE: str = "Perl 6 Party"
    SITE_DESCRIPTION: str = "Posts about Perl 6, with code you can run."
    SITE_SOURCE_URL: str = ""

    # Code runner
    RUNNER_URL: str = "https://run.glot.io/languages/perl6/latest"
    RUNNER_TOKEN: str = ""
    RUNNER_FILENAME: str = "main.p6"
    RUNNER_TIMEOUT: float = 10.0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    PROXY_HEADERS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
