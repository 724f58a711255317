"""Business logic for field definition operations."""

import logging
from typing import Any

from django.core.exceptions import ValidationError
from django.db import transaction

from server.apps.fieldtypes.models import FieldDefinition

logger = logging.getLogger(__name__)


def create_field_definition(
    identifier: str,
    name: str,
    field_type_identifier: str,
    validator_configuration: dict[str, Any] | None = None,
    field_settings: dict[str, Any] | None = None,
) -> FieldDefinition:
    """Validate and create a field definition.

    Configuration is validated as given, then completed with the field
    type's schema defaults before it is stored.

    Args:
        identifier: Unique definition identifier.
        name: Human readable name.
        field_type_identifier: Registered field type identifier.
        validator_configuration: Validator identifier -> parameters.
        field_settings: Field type settings.

    Returns:
        Created FieldDefinition instance.

    Raises:
        ValidationError: If field type or configuration is rejected.
        Exception: If DB operation fails.
    """
    definition = FieldDefinition(
        identifier=identifier,
        name=name,
        field_type_identifier=field_type_identifier,
        validator_configuration=validator_configuration or {},
        field_settings=field_settings or {},
    )
    definition.full_clean()

    field_type = definition.get_field_type()
    definition.validator_configuration = (
        field_type.apply_default_validator_configuration(
            definition.validator_configuration,
        )
    )
    definition.field_settings = field_type.apply_default_field_settings(
        definition.field_settings,
    )

    try:
        with transaction.atomic():
            definition.save()
    except Exception:
        logger.exception('Failed to save field definition: %s', identifier)
        raise

    logger.info(
        'Field definition created: %s (type: %s, ID: %d)',
        identifier,
        field_type_identifier,
        definition.id,
    )
    return definition


def update_validator_configuration(
    definition_id: int,
    validator_configuration: dict[str, Any],
) -> FieldDefinition:
    """Replace validator configuration of a field definition.

    Args:
        definition_id: ID of definition to update.
        validator_configuration: New validator identifier -> parameters.

    Returns:
        Updated FieldDefinition instance.

    Raises:
        FieldDefinition.DoesNotExist: If definition doesn't exist.
        ValidationError: If configuration is rejected.
    """
    with transaction.atomic():
        definition = FieldDefinition.objects.select_for_update().get(
            id=definition_id,
        )
        definition.validator_configuration = validator_configuration
        definition.full_clean()

        definition.validator_configuration = (
            definition.get_field_type().apply_default_validator_configuration(
                validator_configuration,
            )
        )
        definition.save(
            update_fields=['validator_configuration', 'modified_at'],
        )

    logger.info(
        'Validator configuration updated: %s (ID: %d)',
        definition.identifier,
        definition_id,
    )
    return definition


def find_invalid_definitions(
    field_type_identifier: str | None = None,
) -> list[tuple[FieldDefinition, list[str]]]:
    """Re-run design-time checks on stored field definitions.

    Args:
        field_type_identifier: Only check definitions of this type.

    Returns:
        (definition, messages) pairs for every definition failing checks.
    """
    definitions = FieldDefinition.objects.all()
    if field_type_identifier:
        definitions = definitions.filter(
            field_type_identifier=field_type_identifier,
        )

    invalid: list[tuple[FieldDefinition, list[str]]] = []
    for definition in definitions:
        try:
            definition.clean()
        except ValidationError as error:
            invalid.append((definition, error.messages))

    logger.debug('Found %d invalid field definitions', len(invalid))
    return invalid
