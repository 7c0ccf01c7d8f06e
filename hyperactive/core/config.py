"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from hyperactive.domain.cors import CorsHeadersMode, CorsPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Address the example server binds to.
        port: Port the example server binds to.
        cors_allow_origin: Access-Control-Allow-Origin value.
        cors_allow_methods: Access-Control-Allow-Methods value.
        cors_allow_headers: Access-Control-Allow-Headers value (fixed list).
        cors_headers_mode: "fixed-list" or "echo-requested".
        cors_max_age: Optional Access-Control-Max-Age in seconds.
        x_api_key: Default X-Api-Key sent by the outbound client.
        upstream_timeout_seconds: Timeout for outbound client calls.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Hyperactive"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    cors_allow_origin: str = "*"
    cors_allow_methods: str = "POST, GET, OPTIONS"
    cors_allow_headers: str = "*"
    cors_headers_mode: CorsHeadersMode = CorsHeadersMode.FIXED_LIST
    cors_max_age: int | None = None

    x_api_key: str = ""
    upstream_timeout_seconds: float = 10.0

    def get_cors_policy(self) -> CorsPolicy:
        """Return the frozen CORS policy described by these settings."""
        return CorsPolicy(
            allow_origin=self.cors_allow_origin,
            allow_methods=self.cors_allow_methods,
            allow_headers=self.cors_allow_headers,
            headers_mode=self.cors_headers_mode,
            max_age=self.cors_max_age,
        )


settings = Settings()
