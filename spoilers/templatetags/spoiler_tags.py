# spoilers/templatetags/spoiler_tags.py

"""
Spoiler block tag: a clickable summary with a collapsible markdown body.

Usage in templates:

    {% spoiler Who did it? %}
    It was **the butler**.
    {% endspoiler %}

renders

    <details><summary>Who did it?</summary><div class="spoiler-body">...</div></details>

The body is rendered by the template engine, then converted with the
markdown converter registered in the render context.
"""

import logging
from dataclasses import dataclass

from django import template
from django.conf import settings
from django.utils.safestring import mark_safe

from spoilers.markdown.converters import CONVERTERS_CONTEXT_KEY, ConverterRegistry
from spoilers.markdown.errors import ConverterNotFound

logger = logging.getLogger(__name__)

register = template.Library()


@dataclass(frozen=True)
class SpoilerInvocation:
    """What one {% spoiler %} occurrence captured at parse time."""

    summary: str
    body: template.NodeList


class SpoilerNode(template.Node):
    child_nodelists = ("nodelist",)

    def __init__(self, invocation):
        self.invocation = invocation
        self.nodelist = invocation.body

    def __repr__(self):
        return f"<{self.__class__.__qualname__}: {self.invocation.summary!r}>"

    def render(self, context):
        raw_body = self.nodelist.render(context)
        body_html = convert_body(context, raw_body)
        return render_spoiler(self.invocation.summary, body_html)


def convert_body(context, raw_body, identifier=None):
    """
    Convert a spoiler body with the converter found in the render context.

    ``identifier`` defaults to the ``SPOILERS_DEFAULT_CONVERTER`` setting.
    Errors raised by the converter are not caught.
    """
    if identifier is None:
        identifier = getattr(settings, "SPOILERS_DEFAULT_CONVERTER", "markdown")

    converters = context.get(CONVERTERS_CONTEXT_KEY)
    if not isinstance(converters, ConverterRegistry):
        raise ConverterNotFound(
            f"Render context has no ConverterRegistry under '{CONVERTERS_CONTEXT_KEY}' "
            f"(found {type(converters).__name__}); "
            f"cannot convert spoiler body with {identifier!r}"
        )

    converter = converters.get(identifier)
    logger.debug(f"Converting {len(raw_body)} characters of spoiler body with '{identifier}'")
    return converter(raw_body)


def render_spoiler(summary, body_html):
    """Wrap a summary and converted body in the details skeleton. No escaping."""
    return mark_safe(
        "<details>"
        f"<summary>{summary}</summary>"
        f'<div class="spoiler-body">{body_html}</div>'
        "</details>"
    )


def do_spoiler(parser, token):
    """
    Usage:
    {% spoiler Summary text %}
        Markdown body, may contain {{ variables }} and other tags
    {% endspoiler %}
    """
    bits = token.contents.split(None, 1)
    tag_name = bits[0]
    summary = bits[1].strip() if len(bits) > 1 else ""

    # Raises TemplateSyntaxError when the closing tag is missing
    nodelist = parser.parse((f"end{tag_name}",))
    parser.delete_first_token()

    logger.debug(f"Parsed {{% {tag_name} %}} block with summary {summary!r}")
    return SpoilerNode(SpoilerInvocation(summary=summary, body=nodelist))


def register_spoiler(library, name="spoiler"):
    """Register the spoiler block tag on ``library`` under ``name``."""
    library.tag(name, do_spoiler)
    return library


register_spoiler(register)
