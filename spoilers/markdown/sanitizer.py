# spoilers/markdown/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)

GLOBAL_ATTRIBUTES = {"class", "id", "title", "role"}


def _allow_global_attribute(tag, name, value):
    return name in GLOBAL_ATTRIBUTES or name.startswith("aria-")


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "del",
            "sup",
            "sub",
            "hr",
            "section",
            "aside",
            "figure",
            "figcaption",
            # collapsible blocks, so nested spoilers survive
            "details",
            "summary",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "kbd",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            "img",
            # task lists
            "label",
            "input",
        }
    )

    allowed_attrs = {
        "*": _allow_global_attribute,
        "a": ["href", "title", "rel"],
        "img": ["src", "alt", "title", "width", "height"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
        "ol": ["start", "type"],
        "col": ["span"],
    }

    allowed_protocols = ["http", "https", "mailto"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html: str) -> str:
    """
    Sanitize converter output using bleach.

    Disallowed tags are kept as escaped text rather than stripped.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    logger.debug("Sanitizing %d characters of converted markdown", len(html))
    return bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,
    )
