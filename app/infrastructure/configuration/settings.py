"""Exporter application settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.exporters import ExporterSettings


class Settings(BaseSettings):
    """Application settings.

    Environment Variables:
        ENVIRONMENT: Deployment environment (development, staging, production)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_MAX_VALUE_LENGTH: Longest string value logged before truncation
        APP_NAME: Application name attached to log entries
        APP_VERSION: Application version attached to log entries

    The options of individual exporters (destination folder, domain,
    prefix) are not read from the environment; they arrive through the
    host-supplied Configuration.

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.is_production:
            ...
        plugin_paths = settings.exporters.plugin_paths
        ```
    """

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_MAX_VALUE_LENGTH: int = 500
    APP_NAME: str = "php-exporter"
    APP_VERSION: str = "unknown"

    exporters: ExporterSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "exporters": ExporterSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
