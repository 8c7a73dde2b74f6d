"""Application settings and configuration.

This module defines all configuration options for the Digix blog service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Digix Blog", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./digix_blog.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Editorial access; admin endpoints are disabled while unset.
    admin_api_token: str | None = Field(default=None, alias="ADMIN_API_TOKEN")

    # Content rules
    comment_max_length: int = Field(default=1000, alias="COMMENT_MAX_LENGTH")
    related_posts_limit: int = Field(default=3, alias="RELATED_POSTS_LIMIT")
    words_per_minute: int = Field(default=200, alias="WORDS_PER_MINUTE")

    # Public site and API client
    site_url: str = Field(default="https://www.digicides.com", alias="SITE_URL")
    api_base_url: str = Field(default="http://localhost:8000/api/v1", alias="API_BASE_URL")
    api_timeout_seconds: float = Field(default=10.0, alias="API_TIMEOUT_SECONDS")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides.

        Returns:
            The active database URL (test database if in testing mode, otherwise production)
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    def blog_url(self, slug: str) -> str:
        """Return the public page URL for a post slug."""
        return f"{self.site_url.rstrip('/')}/blog/{slug}"


settings = Settings()
