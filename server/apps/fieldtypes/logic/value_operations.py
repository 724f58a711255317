"""Business logic for field value operations."""

import logging
from typing import Any

from django.core.exceptions import ValidationError

from server.apps.fieldtypes.models import FieldDefinition
from server.apps.fieldtypes.validation import FieldValidationError
from server.apps.fieldtypes.values import BinaryBaseValue, PersistenceValue

logger = logging.getLogger(__name__)


def collect_value_errors(
    field_definition: FieldDefinition,
    field_value: BinaryBaseValue,
) -> list[FieldValidationError]:
    """Validate value against its definition without raising.

    Args:
        field_definition: Definition of the field.
        field_value: Value to validate.

    Returns:
        List of validation errors, empty if value is valid.
    """
    errors = field_definition.get_field_type().validate(
        field_definition,
        field_value,
    )
    if errors:
        logger.warning(
            'Value of field %s failed validation: %s',
            field_definition.identifier,
            '; '.join(error.get_message() for error in errors),
        )
    return errors


def prepare_field_value(
    field_definition: FieldDefinition,
    input_value: Any,
) -> PersistenceValue:
    """Accept input for a field and convert it for storage.

    Args:
        field_definition: Definition of the field.
        input_value: None, a path, a hash-style mapping or a value.

    Returns:
        Persistence record to hand over to storage.

    Raises:
        InvalidArgumentError: If input is malformed.
        ValidationError: If value breaks a configured validator.
    """
    field_type = field_definition.get_field_type()
    field_value = field_type.accept_value(input_value)

    errors = collect_value_errors(field_definition, field_value)
    if errors:
        raise ValidationError([error.to_django() for error in errors])

    logger.debug(
        'Prepared value of field %s: %s',
        field_definition.identifier,
        field_value.path,
    )
    return field_type.to_persistence_value(field_value)


def load_field_value(
    field_definition: FieldDefinition,
    persistence_value: PersistenceValue,
) -> BinaryBaseValue:
    """Rebuild field value from a persistence record.

    Args:
        field_definition: Definition of the field.
        persistence_value: Record loaded from storage.

    Returns:
        Field value.
    """
    field_type = field_definition.get_field_type()
    return field_type.from_persistence_value(persistence_value)
