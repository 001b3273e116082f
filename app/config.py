# app/config.py
from functools import lru_cache
from typing import List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8081, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    google_books_url: str = Field(
        default="https://www.googleapis.com/books/v1/volumes", alias="GOOGLE_BOOKS_URL"
    )
    upstream_page_size: int = Field(default=20, alias="UPSTREAM_PAGE_SIZE")
    upstream_timeout_seconds: int = Field(default=10, alias="UPSTREAM_TIMEOUT_SECONDS")
    max_upstream_calls: int = Field(default=10, alias="MAX_UPSTREAM_CALLS")
    require_categories: bool = Field(default=False, alias="REQUIRE_CATEGORIES")

    # Not used by /books; kept for authenticated Google Books writes.
    oauth_client_id: str = Field(default="", alias="OAUTH_CLIENT_ID")
    oauth_client_secret: str = Field(default="", alias="OAUTH_CLIENT_SECRET")
    oauth_redirect_url: str = Field(default="http://localhost:8081/redirect", alias="OAUTH_REDIRECT_URL")
    oauth_scopes: List[str] = Field(
        default_factory=lambda: ["https://www.googleapis.com/auth/books"], alias="OAUTH_SCOPES"
    )

    @model_validator(mode="after")
    def validate_runtime(self) -> "Settings":
        if not 0 < self.port < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        if not self.google_books_url.strip():
            raise ValueError("GOOGLE_BOOKS_URL is required")
        if not 1 <= self.upstream_page_size <= 40:
            raise ValueError("UPSTREAM_PAGE_SIZE must be between 1 and 40")
        if self.upstream_timeout_seconds < 1:
            raise ValueError("UPSTREAM_TIMEOUT_SECONDS must be >= 1")
        if self.max_upstream_calls < 1:
            raise ValueError("MAX_UPSTREAM_CALLS must be >= 1")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
