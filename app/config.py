"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All environment variables read by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Supabase ──────────────────────────────────────────────
    supabase_url: str = ""
    supabase_service_role_key: str = ""  # service role key (bypasses RLS)
    test_database_url: str | None = None
    posts_table: str = "blog_posts"

    # ── Server ────────────────────────────────────────────────
    app_name: str = "blog-posts-api"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    cors_origins: list[str] = ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings. Import this wherever config is needed."""
    return Settings()
