"""docsite-i18n - localization core for the multi-locale documentation site."""

__version__ = "0.1.0"
