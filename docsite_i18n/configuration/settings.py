"""Docsite i18n configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from docsite_i18n.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Application-level settings plus the i18n feature settings.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        SITE_URL: Public base URL used for alternate-language links

    Example:
        ```python
        from docsite_i18n.configuration import settings

        default_code = settings.i18n.default_locale
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    SITE_URL: str = "https://hytalemodding.dev"

    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings, instantiating feature settings from the environment.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        kwargs.setdefault("i18n", I18nSettings())
        super().__init__(**kwargs)


settings = Settings()
