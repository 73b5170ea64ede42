from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8080

    WEBEX_API_BASE: str = "https://webexapis.com/v1/"
    WEBEX_BOT_TOKEN: str | None = None
    WEBEX_ROOM_ID: str | None = None
    HTTP_TIMEOUT_SECONDS: float = 15.0

    MESSAGES_MAX: int = 20
    ROOMS_PAGE_SIZE: int = 100
    ROOMS_MAX_PAGES: int = 3
    CARD_DEFAULT_VERSION: str = "1.4"

    STATE_FILE: str = "~/.webex_poster.json"
    STATE_KEY: str = "webexPoster"
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str] | None) -> list[str] | None:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("WEBEX_API_BASE")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        # relative paths are joined onto the base, so it must end in "/"
        return value if value.endswith("/") else value + "/"

    class Config:
        env_file = ".env"


default_settings: Settings | None = None


def get_settings() -> Settings:
    global default_settings
    if default_settings is None:
        default_settings = Settings()
    return default_settings


settings = get_settings()
