"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (PAGESIFT_ prefix), including a ``.env`` file
  2. YAML config file (if specified) or explicit keyword arguments
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_USER_AGENT = "PageSift/0.1 (https://github.com/pagesift/pagesift; pagesift@example.com)"


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class WikipediaSettings(BaseModel):
    """Wikipedia provider configuration.

    The result budgets mirror what the UI badge layout expects: a short
    collapsed snippet and a longer expanded description.
    """

    language: str = Field(default="en", description="Wikipedia language code (e.g. 'en', 'de')")
    endpoint: str | None = Field(
        default=None,
        description="Action API endpoint; derived from language when unset",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent sent to the Wikimedia API")
    timeout: float = Field(default=15.0, gt=0, description="HTTP client timeout in seconds")
    pacing_delay: float = Field(
        default=0.4,
        ge=0,
        description="Fixed wait before each primary request in seconds (0 disables)",
    )
    snippet_max_chars: int = Field(default=160, ge=1, description="Short snippet budget")
    description_max_chars: int = Field(default=600, ge=1, description="Extract-based description budget")
    max_limit: int = Field(default=500, ge=1, description="Upper bound for the requested page size")
    enrich: bool = Field(default=True, description="Fetch page extracts for long-form descriptions")

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("language must not be empty")
        return v


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the PAGESIFT_ prefix.
    Nested settings use double underscores: PAGESIFT_SERVER__PORT=9090

    Example:
        PAGESIFT_SERVER__PORT=9090
        PAGESIFT_WIKIPEDIA__LANGUAGE=de
        PAGESIFT_WIKIPEDIA__PACING_DELAY=0
    """

    model_config = {
        "env_prefix": "PAGESIFT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    debug: bool = Field(default=False, description="Debug mode (FastAPI tracebacks on server errors)")

    server: ServerSettings = Field(default_factory=ServerSettings)
    wikipedia: WikipediaSettings = Field(default_factory=WikipediaSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Keyword arguments (YAML values) sit beneath the environment; nested sections are deep-merged
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
