# spoilers/markdown/converters.py

import logging
from functools import lru_cache

import markdown
import pypandoc
from django.conf import settings
from django.utils.module_loading import import_string

from .config import get_markdown_config, get_pandoc_config
from .errors import ConversionError, ConverterNotFound
from .sanitizer import sanitize_html

logger = logging.getLogger(__name__)

# Template context variable holding the site's ConverterRegistry
CONVERTERS_CONTEXT_KEY = "spoilers_converters"

DEFAULT_CONVERTERS = {
    "markdown": "spoilers.markdown.converters.PandocConverter",
    "python-markdown": "spoilers.markdown.converters.PythonMarkdownConverter",
}


class ConverterRegistry:
    """
    Site-scoped mapping of converter identifiers to converters.

    A converter is any callable taking markdown text and returning HTML.
    The registry is shared between renders and is not modified by them.
    """

    def __init__(self, converters=None):
        self._converters = {}
        for identifier, converter in (converters or {}).items():
            self.register(identifier, converter)

    def register(self, identifier: str, converter):
        if not callable(converter):
            raise TypeError(
                f"Converter for {identifier!r} must be callable, got {type(converter).__name__}"
            )
        self._converters[identifier] = converter
        return converter

    def find(self, identifier: str):
        """Return the converter for ``identifier``, or None."""
        return self._converters.get(identifier)

    def get(self, identifier: str):
        """Return the converter for ``identifier`` or raise ConverterNotFound."""
        converter = self.find(identifier)
        if converter is None:
            raise ConverterNotFound(
                f"No markdown converter registered as {identifier!r} "
                f"(available: {', '.join(self.identifiers()) or 'none'})"
            )
        return converter

    def identifiers(self) -> list:
        return sorted(self._converters)

    def __contains__(self, identifier) -> bool:
        return identifier in self._converters

    def __len__(self) -> int:
        return len(self._converters)

    def __repr__(self):
        return f"<ConverterRegistry {self.identifiers()}>"


class IdentityConverter:
    """Pass text through unchanged, for bodies that are already HTML."""

    def __call__(self, text: str) -> str:
        return text


class PandocConverter:
    """
    Convert markdown to HTML5 with pandoc through pypandoc.

    Pandoc failures (non-zero exit, missing binary) surface as ConversionError.
    """

    def __init__(self, extra_args=None, sanitize=None):
        config = get_pandoc_config()
        self.format = config["format"]
        self.to = config["to"]
        self.extra_args = list(extra_args) if extra_args is not None else config["extra_args"]
        if sanitize is None:
            sanitize = getattr(settings, "SPOILERS_SANITIZE", False)
        self.sanitize = sanitize

    def __call__(self, text: str) -> str:
        if not text:
            return ""

        try:
            html = pypandoc.convert_text(
                text,
                to=self.to,
                format=self.format,
                extra_args=self.extra_args,
            )
        except (RuntimeError, OSError) as e:
            raise ConversionError(f"pandoc could not convert markdown: {e}") from e

        if self.sanitize:
            html = sanitize_html(html)
        return html


class PythonMarkdownConverter:
    """Convert markdown to HTML with Python-Markdown."""

    def __init__(self, extensions=None):
        config = get_markdown_config()
        if extensions is not None:
            config["extensions"] = list(extensions)
        self._md = markdown.Markdown(**config)

    def __call__(self, text: str) -> str:
        # reset() clears reference links and footnotes left by the previous body
        return self._md.reset().convert(text)


def build_converter_registry(config=None) -> ConverterRegistry:
    """
    Build a registry from ``{identifier: "dotted.path.ConverterClass"}``.

    Defaults to the ``SPOILERS_CONVERTERS`` setting. Each class is
    instantiated without arguments.
    """
    if config is None:
        config = getattr(settings, "SPOILERS_CONVERTERS", DEFAULT_CONVERTERS)

    registry = ConverterRegistry()
    for identifier, path in config.items():
        converter_class = import_string(path)
        registry.register(identifier, converter_class())
        logger.debug(f"Registered markdown converter '{identifier}' ({path})")
    return registry


@lru_cache(maxsize=1)
def get_site_converters() -> ConverterRegistry:
    """Process-wide converter registry built from settings."""
    registry = build_converter_registry()
    logger.info(f"Markdown converters ready: {', '.join(registry.identifiers())}")
    return registry
