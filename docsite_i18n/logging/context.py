"""Locale context binding for structured logging.

Binds the locale a page is rendered for, so every log entry emitted while
resolving messages or localizing the navigation tree carries it.

Usage:
    from docsite_i18n.logging import bind_locale_context

    with bind_locale_context("de-DE", requested_locale="de_de"):
        # All logs within this block include locale="de-DE"
        logger.info("rendering_page")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_locale_context(
    locale_code: str,
    requested_locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind the resolved locale to all logs within the context manager.

    Values bound by an enclosing block are restored on exit.

    Args:
        locale_code: Resolved locale code (e.g., "de-DE").
        requested_locale: Raw code as requested, when it differs.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {"locale": locale_code}
    if requested_locale is not None and requested_locale != locale_code:
        context["requested_locale"] = requested_locale
    context.update(extra_context)

    with structlog.contextvars.bound_contextvars(**context):
        yield


def get_locale_context() -> Optional[str]:
    """Get the locale currently bound to the logging context, if any."""
    return structlog.contextvars.get_contextvars().get("locale")
