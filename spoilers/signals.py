# spoilers/signals.py

import logging

from django.core.signals import setting_changed
from django.dispatch import receiver

from spoilers.markdown.converters import get_site_converters

logger = logging.getLogger(__name__)

CONVERTER_SETTINGS = {
    "SPOILERS_CONVERTERS",
    "SPOILERS_SANITIZE",
    "SPOILERS_PANDOC_EXTRA_ARGS",
    "SPOILERS_MARKDOWN_EXTENSIONS",
}


@receiver(setting_changed)
def reset_site_converters(sender, setting, **kwargs):
    """Drop the cached converter registry when its settings change."""
    if setting not in CONVERTER_SETTINGS:
        return

    logger.debug(f"{setting} changed, clearing site converter registry")
    get_site_converters.cache_clear()
