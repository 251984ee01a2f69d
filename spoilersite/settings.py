"""
Django settings for the spoiler tag site.

Only the template engine and the markdown converters are configured;
the page build pipeline that renders templates lives outside this project.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "spoilersite-insecure-build-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "") == "1"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "spoilers",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            # Pages can use {% spoiler %} without {% load spoiler_tags %}
            "builtins": ["spoilers.templatetags.spoiler_tags"],
            "context_processors": [
                "spoilers.context_processors.converters",
            ],
        },
    },
]

DATABASES = {}

USE_TZ = True

# Markdown converters available to templates, keyed by identifier
SPOILERS_CONVERTERS = {
    "markdown": "spoilers.markdown.converters.PandocConverter",
    "python-markdown": "spoilers.markdown.converters.PythonMarkdownConverter",
}

# Identifier the spoiler tag asks the registry for
SPOILERS_DEFAULT_CONVERTER = os.environ.get("SPOILERS_DEFAULT_CONVERTER", "markdown")

# Run pandoc output through bleach before it reaches the page
SPOILERS_SANITIZE = os.environ.get("SPOILERS_SANITIZE", "") == "1"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "spoilers": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
        },
    },
}
