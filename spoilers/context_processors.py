from spoilers.markdown.converters import CONVERTERS_CONTEXT_KEY, get_site_converters


def converters(request):
    """Expose the site's markdown converters to every RequestContext."""
    return {CONVERTERS_CONTEXT_KEY: get_site_converters()}
