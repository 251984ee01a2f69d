"""Markdown layer error hierarchy."""

from django.core.exceptions import ImproperlyConfigured


class MarkdownError(Exception):
    """Base for all spoilers.markdown errors."""


class ConverterNotFound(MarkdownError, ImproperlyConfigured):
    """Raised when the render context has no converter for an identifier."""


class ConversionError(MarkdownError):
    """Raised by a converter that cannot turn its input into HTML."""
