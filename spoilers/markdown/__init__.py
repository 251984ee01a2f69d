"""Markdown conversion for spoiler bodies and whole pages.

Converters are plain callables (``str -> str``) collected in a
``ConverterRegistry``.  The site-wide registry is built from the
``SPOILERS_CONVERTERS`` setting and handed to templates through the
render context.
"""

from spoilers.markdown.converters import (
    CONVERTERS_CONTEXT_KEY,
    ConverterRegistry,
    IdentityConverter,
    PandocConverter,
    PythonMarkdownConverter,
    build_converter_registry,
    get_site_converters,
)
from spoilers.markdown.errors import ConversionError, ConverterNotFound, MarkdownError

__all__ = [
    "CONVERTERS_CONTEXT_KEY",
    "ConversionError",
    "ConverterNotFound",
    "ConverterRegistry",
    "IdentityConverter",
    "MarkdownError",
    "PandocConverter",
    "PythonMarkdownConverter",
    "build_converter_registry",
    "get_site_converters",
]
