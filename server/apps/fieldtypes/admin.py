"""Django admin configuration for fieldtypes app."""

from django.contrib import admin

from server.apps.fieldtypes.logic.binary_base import (
    FILE_SIZE_VALIDATOR,
    MAX_FILE_SIZE_PARAMETER,
)
from server.apps.fieldtypes.models import FieldDefinition


@admin.register(FieldDefinition)
class FieldDefinitionAdmin(admin.ModelAdmin[FieldDefinition]):
    """Admin interface for FieldDefinition model."""

    list_display = [
        'identifier',
        'name',
        'field_type_identifier',
        'max_file_size_display',
        'modified_at',
    ]

    list_filter = [
        'field_type_identifier',
    ]

    search_fields = [
        'identifier',
        'name',
    ]

    readonly_fields = [
        'created_at',
        'modified_at',
    ]

    fieldsets = (
        ('Definition', {
            'fields': ('identifier', 'name', 'field_type_identifier'),
        }),
        ('Configuration', {
            'fields': ('validator_configuration', 'field_settings'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'modified_at'),
        }),
    )

    def max_file_size_display(self, obj: FieldDefinition) -> str:
        """Display configured maximum file size.

        Args:
            obj: FieldDefinition instance.

        Returns:
            Formatted limit (e.g., '10 MB') or 'No limit'.
        """
        parameters = obj.get_validator_configuration().get(FILE_SIZE_VALIDATOR)
        if not isinstance(parameters, dict):
            return 'No limit'
        max_file_size = parameters.get(MAX_FILE_SIZE_PARAMETER)
        if not max_file_size:
            return 'No limit'
        return f'{max_file_size} MB'
    max_file_size_display.short_description = 'Max size'  # type: ignore[attr-defined]
