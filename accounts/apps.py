from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Django app configuration for the Accounts app.

    Sign-up, sign-in and sign-out pages on top of django.contrib.auth.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
