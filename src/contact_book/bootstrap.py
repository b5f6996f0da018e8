"""Wires a ContactService from settings. Called once by the presentation layer."""

import logging
from functools import partial

from contact_book.application import ContactService
from contact_book.infrastructure import (
    Settings,
    configure_logging,
    format_phone,
    load_settings,
)

logger = logging.getLogger(__name__)


def create_service(settings: Settings | None = None) -> ContactService:
    """Return a ContactService with an empty book, formatting phones for settings.default_region.

    Without explicit settings they are loaded from the environment and logging is
    configured from them. Callers passing their own Settings configure logging themselves.
    """
    if settings is None:
        settings = load_settings()
        configure_logging(settings)
    logger.info("Contact book ready (default phone region: %s)", settings.default_region or "none")
    return ContactService(
        phone_formatter=partial(format_phone, default_region=settings.default_region),
    )
