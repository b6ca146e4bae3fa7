from django.apps import AppConfig


class CookbookConfig(AppConfig):
    """App configuration for the cookbook application (recipes and ingredient catalog)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "cookbook"
