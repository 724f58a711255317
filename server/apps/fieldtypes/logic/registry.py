"""Lookup of field types configured in ``settings.FIELD_TYPES``."""

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from server.apps.fieldtypes.exceptions import UnknownFieldTypeError
from server.apps.fieldtypes.logic.binary_base import BinaryBaseType

logger = logging.getLogger(__name__)


def get_field_type_identifiers() -> list[str]:
    """List identifiers of all configured field types.

    Returns:
        Sorted identifiers.
    """
    return sorted(settings.FIELD_TYPES)


def get_field_type(identifier: str) -> BinaryBaseType:
    """Get field type instance registered under identifier.

    Field types hold no state, a new instance is returned per call.

    Args:
        identifier: Field type identifier (e.g., 'ezbinaryfile').

    Returns:
        Field type instance.

    Raises:
        UnknownFieldTypeError: If identifier is not configured.
    """
    try:
        dotted_path = settings.FIELD_TYPES[identifier]
    except KeyError as error:
        raise UnknownFieldTypeError(identifier) from error

    logger.debug('Resolving field type %s -> %s', identifier, dotted_path)
    field_type_class = import_string(dotted_path)
    return field_type_class()
