from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Google Places API ---
    GOOGLE_PLACES_API_KEY: str = Field(
        default="",
        description="API key for Google Places API (New).",
    )
    PLACES_HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Timeout in seconds for each Places API request.",
    )

    # --- Logging ---
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum level for the loguru stderr sink.",
    )

    # --- Observability ---
    OTEL_SERVICE_NAME: str = Field(
        default="places-client-mcp",
        description="Service name reported on OpenTelemetry spans.",
    )
    AGENT_OBSERVABILITY_ENABLED: bool = Field(
        default=True,
        description="Emit OpenTelemetry spans for MCP tool invocations.",
    )


settings = Settings()
