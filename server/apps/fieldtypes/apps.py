"""Django app configuration for fieldtypes app."""

from django.apps import AppConfig


class FieldTypesConfig(AppConfig):
    """Configuration for fieldtypes app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.fieldtypes'
    verbose_name = 'Field Types'
