"""Structured logging for docsite-i18n."""

from docsite_i18n.logging.context import bind_locale_context, get_locale_context
from docsite_i18n.logging.setup import (
    configure_logging,
    get_module_logger,
    logger,
)

__all__ = [
    "bind_locale_context",
    "configure_logging",
    "get_locale_context",
    "get_module_logger",
    "logger",
]
