"""Database models for fieldtypes app."""

from typing import Any, Final, final, override

from django.core.exceptions import ValidationError
from django.db import models

from server.apps.fieldtypes.exceptions import UnknownFieldTypeError
from server.apps.fieldtypes.logic.binary_base import BinaryBaseType
from server.apps.fieldtypes.logic.registry import (
    get_field_type,
    get_field_type_identifiers,
)

# Constants for field max lengths
_IDENTIFIER_MAX_LENGTH: Final = 50
_NAME_MAX_LENGTH: Final = 255


@final
class FieldDefinition(models.Model):
    """Definition of a content field backed by a binary field type.

    Holds the design-time configuration the field type reads when
    validating values: validator configuration (e.g. max file size)
    and field settings (e.g. media player type).
    """

    identifier = models.SlugField(
        max_length=_IDENTIFIER_MAX_LENGTH,
        unique=True,
    )

    name = models.CharField(
        max_length=_NAME_MAX_LENGTH,
    )

    field_type_identifier = models.CharField(
        max_length=_IDENTIFIER_MAX_LENGTH,
        db_index=True,
        help_text='Registered field type, e.g. ezbinaryfile or ezmedia',
    )

    field_settings = models.JSONField(
        default=dict,
        blank=True,
        help_text='Field type settings, e.g. {"mediaType": "html5_video"}',
    )

    validator_configuration = models.JSONField(
        default=dict,
        blank=True,
        help_text='Validator parameters, e.g. '
        '{"FileSizeValidator": {"maxFileSize": 10}}',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Field Definition'  # type: ignore[mutable-override]
        verbose_name_plural = 'Field Definitions'  # type: ignore[mutable-override]
        ordering = ['identifier']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.identifier} ({self.field_type_identifier})'

    @override
    def clean(self) -> None:
        """Run the field type's design-time checks.

        Raises:
            ValidationError: If field type is unknown or configuration
                is rejected by the field type.
        """
        try:
            field_type = self.get_field_type()
        except UnknownFieldTypeError as error:
            raise ValidationError({
                'field_type_identifier': ValidationError(
                    '{error}, expected one of: {choices}'.format(
                        error=error,
                        choices=', '.join(get_field_type_identifiers()),
                    ),
                    code='unknown_field_type',
                ),
            }) from error

        errors: dict[str, list[ValidationError]] = {}

        configuration_errors = field_type.validate_validator_configuration(
            self.validator_configuration or {},
        )
        if configuration_errors:
            errors['validator_configuration'] = [
                error.to_django() for error in configuration_errors
            ]

        settings_errors = field_type.validate_field_settings(
            self.field_settings or {},
        )
        if settings_errors:
            errors['field_settings'] = [
                error.to_django() for error in settings_errors
            ]

        if errors:
            raise ValidationError(errors)

    def get_field_type(self) -> BinaryBaseType:
        """Get field type this definition is configured with.

        Returns:
            Field type instance.

        Raises:
            UnknownFieldTypeError: If field type is not registered.
        """
        return get_field_type(self.field_type_identifier)

    def get_validator_configuration(self) -> dict[str, Any]:
        """Get validator identifier -> parameters mapping.

        Returns:
            Validator configuration (empty dict if unset or malformed).
        """
        if not isinstance(self.validator_configuration, dict):
            return {}
        return self.validator_configuration

    def get_field_settings(self) -> dict[str, Any]:
        """Get field settings.

        Returns:
            Field settings (empty dict if unset or malformed).
        """
        if not isinstance(self.field_settings, dict):
            return {}
        return self.field_settings
