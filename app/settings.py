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

    # Content
    CONTENT_DIR: str = "src/content/blog"
    SERVICES_DIR: str = "src/content/services"
    PROJECTS_DIR: str = "src/content/projects"
    CONTENT_EXTENSION: str = ".mdx"
    WORDS_PER_MINUTE: int = 200

    # Logging
    LOG_LEVEL: str = "INFO"

    # Shared key for the site's rendering layer
    SITE_API_KEY: str = ""

    @property
    def content_dirs(self) -> dict:
        return {
            "blog": self.CONTENT_DIR,
            "services": self.SERVICES_DIR,
            "projects": self.PROJECTS_DIR,
        }


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
