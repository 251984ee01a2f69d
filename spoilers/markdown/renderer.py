# spoilers/markdown/renderer.py

from django.template import Context, Engine

from .converters import CONVERTERS_CONTEXT_KEY, get_site_converters


def render_page(source, context=None, converters=None, engine=None):
    """
    Compile a page template and render it with a converter-aware context.

    Args:
        source: Template source of the page
        context: Optional dict of template variables
        converters: ConverterRegistry for this render; defaults to the
            site registry built from settings
        engine: Django template Engine; defaults to the configured one
    """
    engine = engine or Engine.get_default()
    template = engine.from_string(source)

    page_context = Context(dict(context or {}))
    page_context[CONVERTERS_CONTEXT_KEY] = (
        converters if converters is not None else get_site_converters()
    )

    return template.render(page_context)
