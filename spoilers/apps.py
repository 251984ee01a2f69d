from django.apps import AppConfig


class SpoilersConfig(AppConfig):
    name = "spoilers"

    def ready(self):
        """Import signal handlers when app is ready."""
        import spoilers.signals  # noqa: F401 - Register converter cache invalidation
