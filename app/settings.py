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
    POSTS_DIR: str = "posts"
    PERMALINK_PREFIX: str = "/post/"

    # Site
    SITE_TITLE: str = "Matt Brophy"
    SITE_DESCRIPTION: str = "web developer at remix"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
