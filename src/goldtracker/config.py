"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class NbpSettings(BaseSettings):
    """National Bank of Poland public API connection settings."""

    model_config = SettingsConfigDict(env_prefix="NBP_")

    base_url: str = "https://api.nbp.pl/api"
    timeout_seconds: float = 10.0
    max_retries: int = 3
    retry_base_delay: float = 0.5  # seconds, doubled per attempt


class TrackerSettings(BaseSettings):
    """Tracker behaviour: date range limits and chart placement."""

    model_config = SettingsConfigDict(env_prefix="TRACKER_")

    max_range_days: int = 365  # NBP rejects queries spanning more than 367 days
    chart_surface_id: str = "priceChart"
    currency: str = "USD"


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: str | None = None  # "json" or "console"; LOG_FORMAT env when unset
    nbp: NbpSettings = NbpSettings()
    tracker: TrackerSettings = TrackerSettings()
    dashboard: DashboardSettings = DashboardSettings()
