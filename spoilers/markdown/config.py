from django.conf import settings

PANDOC_EXTENSIONS = [
    "autolink_bare_uris",
    "strikeout",
    "superscript",
    "subscript",
    "task_lists",
    "smart",
    "pipe_tables",
    "definition_lists",
    "footnotes",
    "fenced_code_blocks",
    "fenced_code_attributes",
    "raw_html",
    "tex_math_dollars",
]


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    ``format`` carries the enabled Pandoc markdown extensions; ``extra_args``
    can be replaced wholesale with the ``SPOILERS_PANDOC_EXTRA_ARGS`` setting.
    """
    return {
        "format": "markdown+" + "+".join(PANDOC_EXTENSIONS),
        "to": "html5",
        "extra_args": list(
            getattr(
                settings,
                "SPOILERS_PANDOC_EXTRA_ARGS",
                [
                    # Math rendering with MathJax
                    "--mathjax",
                ],
            )
        ),
    }


def get_markdown_config():
    """Extension list for the Python-Markdown converter."""
    return {
        "extensions": list(
            getattr(
                settings,
                "SPOILERS_MARKDOWN_EXTENSIONS",
                ["extra", "sane_lists"],
            )
        ),
        "output_format": "html",
    }
