"""Base field type for binary content (files and media).

The type turns raw input into a value object, completes it with
metadata read from disk, validates it and maps it to and from its hash
and persistence representations.

Two failure channels are kept apart:
- malformed values raise ``InvalidArgumentError`` subclasses;
- business rules (size limits, validator configuration) are returned
  as lists of ``FieldValidationError`` and never raise.
"""

import abc
import copy
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Final, Protocol

from django.conf import settings

from server.apps.fieldtypes.exceptions import (
    InvalidArgumentTypeError,
    InvalidArgumentValueError,
)
from server.apps.fieldtypes.infrastructure.metadata import (
    extract_filename,
    file_exists,
    get_file_size,
)
from server.apps.fieldtypes.validation import FieldValidationError
from server.apps.fieldtypes.values import BinaryBaseValue, PersistenceValue

FILE_SIZE_VALIDATOR: Final = 'FileSizeValidator'
MAX_FILE_SIZE_PARAMETER: Final = 'maxFileSize'

# maxFileSize is configured in megabytes
_BYTES_PER_MEGABYTE: Final = 1024 * 1024

logger = logging.getLogger(__name__)


class FieldDefinitionLike(Protocol):
    """What field types need from a field definition."""

    def get_validator_configuration(self) -> Mapping[str, Any] | None:
        """Return validator identifier -> parameters mapping."""


def is_int(candidate: Any) -> bool:
    """Check candidate is an integer, booleans excluded."""
    return isinstance(candidate, int) and not isinstance(candidate, bool)


def _get_parameter(parameters: Any, name: str) -> Any:
    # Parameters that are not a mapping carry no values
    if not isinstance(parameters, Mapping):
        return None
    return parameters.get(name)


class BinaryBaseType(abc.ABC):
    """Abstract field type shared by binary file and media fields.

    Subclasses set ``identifier`` and ``value_class`` and implement
    :meth:`create_value`, the single construction hook used by input
    normalization and hash conversion alike.
    """

    identifier: ClassVar[str]
    value_class: ClassVar[type[BinaryBaseValue]]

    settings_schema: ClassVar[dict[str, dict[str, Any]]] = {}

    @abc.abstractmethod
    def create_value(self, input_value: Mapping[str, Any]) -> BinaryBaseValue:
        """Create a value of this type from hash-style input.

        Args:
            input_value: Mapping keyed by hash keys ('path', 'fileName'...).

        Returns:
            New value instance, not yet completed.
        """

    @property
    def validator_configuration_schema(self) -> dict[str, dict[str, Any]]:
        """Validators supported by binary types with parameter defaults."""
        default_size = settings.FIELDTYPES_DEFAULT_MAX_FILE_SIZE_MB
        return {
            FILE_SIZE_VALIDATOR: {
                MAX_FILE_SIZE_PARAMETER: {
                    'type': 'int',
                    'default': default_size or False,
                },
            },
        }

    def get_name(self, value: BinaryBaseValue) -> str | None:
        """Return the display name of value (used in content names).

        Args:
            value: Field value.

        Returns:
            The value's file name.
        """
        return value.file_name

    def get_empty_value(self) -> BinaryBaseValue:
        """Return the distinguished empty value of this type."""
        return self.value_class()

    def is_empty_value(self, value: BinaryBaseValue) -> bool:
        """Check whether value equals the empty value."""
        return value == self.get_empty_value()

    def is_searchable(self) -> bool:
        """Binary fields are always indexed."""
        return True

    def get_sort_info(self, value: BinaryBaseValue) -> bool:
        """Binary values are not sortable."""
        return False

    def build_value(self, input_value: Mapping[str, Any]) -> BinaryBaseValue:
        """Build ``value_class`` from hash keys, rejecting unknown keys.

        Helper for :meth:`create_value` implementations.

        Args:
            input_value: Mapping keyed by hash keys.

        Returns:
            New value instance.

        Raises:
            InvalidArgumentValueError: If input contains unknown keys.
        """
        hash_keys = self.value_class.hash_keys
        unknown_keys = sorted(set(input_value) - set(hash_keys))
        if unknown_keys:
            raise InvalidArgumentValueError(
                'input_value',
                unknown_keys,
                type(self).__name__,
            )

        return self.value_class(**{
            hash_keys[key]: key_value
            for key, key_value in input_value.items()
        })

    def create_value_from_input(self, input_value: Any) -> BinaryBaseValue:
        """Normalize raw input into a completed value.

        Args:
            input_value: A path string, a hash-style mapping or a value.

        Returns:
            Value, completed when its file exists.

        Raises:
            InvalidArgumentTypeError: If input cannot be normalized.
        """
        # construction only from path
        if isinstance(input_value, str):
            input_value = {'path': input_value}

        if isinstance(input_value, Mapping):
            input_value = self.create_value(input_value)

        if not isinstance(input_value, self.value_class):
            raise InvalidArgumentTypeError(
                'input_value',
                self.value_class.__name__,
                input_value,
            )

        self.complete_value(input_value)
        return input_value

    def complete_value(self, value: BinaryBaseValue) -> bool:
        """Fill file name and size from disk where they are unset.

        A missing file is not an error here, only at structure check.

        Args:
            value: Value to complete in place.

        Returns:
            True if the file exists and completion ran, False otherwise.
        """
        if value.path is None or not file_exists(value.path):
            logger.debug('Skipping completion, no file at: %s', value.path)
            return False

        if value.file_name is None:
            value.file_name = extract_filename(value.path)

        if value.file_size is None:
            value.file_size = get_file_size(value.path)

        return True

    def check_value_structure(self, value: BinaryBaseValue) -> None:
        """Check that value is well formed for persistence.

        Args:
            value: Value to check.

        Raises:
            InvalidArgumentValueError: If path is unset or missing on disk.
            InvalidArgumentTypeError: If file name or size has wrong type.
        """
        if value.path is None or not file_exists(value.path):
            raise InvalidArgumentValueError(
                'value.path',
                value.path,
                type(self).__name__,
            )

        if not isinstance(value.file_name, str):
            raise InvalidArgumentTypeError(
                'value.file_name',
                'str',
                value.file_name,
            )

        if value.file_size is not None and not is_int(value.file_size):
            raise InvalidArgumentTypeError(
                'value.file_size',
                'int',
                value.file_size,
            )

    def accept_value(self, input_value: Any) -> BinaryBaseValue:
        """Turn input assigned to a field into a checked value.

        Args:
            input_value: None, a path string, a mapping or a value.

        Returns:
            The empty value, or a completed and structurally valid value.

        Raises:
            InvalidArgumentError: If input is malformed.
        """
        if input_value is None:
            return self.get_empty_value()

        value = self.create_value_from_input(input_value)
        if self.is_empty_value(value):
            return value

        self.check_value_structure(value)
        return value

    def validate(
        self,
        field_definition: FieldDefinitionLike,
        value: BinaryBaseValue,
    ) -> list[FieldValidationError]:
        """Validate value against validators configured on definition.

        Unknown validators are skipped: definitions are checked when
        they are saved, see :meth:`validate_validator_configuration`.

        Args:
            field_definition: Definition providing validator configuration.
            value: Value to validate.

        Returns:
            List of validation errors, empty if value is valid.
        """
        errors: list[FieldValidationError] = []

        if self.is_empty_value(value):
            return errors

        configuration = field_definition.get_validator_configuration()
        if not isinstance(configuration, Mapping):
            configuration = {}

        for validator_identifier, parameters in configuration.items():
            if validator_identifier != FILE_SIZE_VALIDATOR:
                continue

            max_file_size = _get_parameter(parameters, MAX_FILE_SIZE_PARAMETER)
            if not max_file_size:
                # No file size limit
                continue

            if not isinstance(max_file_size, int | float):
                logger.warning(
                    'Ignoring non-numeric %s.%s: %r',
                    FILE_SIZE_VALIDATOR,
                    MAX_FILE_SIZE_PARAMETER,
                    max_file_size,
                )
                continue

            limit_bytes = max_file_size * _BYTES_PER_MEGABYTE
            if value.file_size is not None and value.file_size > limit_bytes:
                errors.append(FieldValidationError(
                    'The file size cannot exceed %size% byte.',
                    'The file size cannot exceed %size% bytes.',
                    {'size': max_file_size},
                    code='max_file_size',
                    count=int(max_file_size),
                ))

        return errors

    def validate_validator_configuration(
        self,
        validator_configuration: Mapping[str, Any],
    ) -> list[FieldValidationError]:
        """Validate validator configuration of a field definition.

        Args:
            validator_configuration: Validator identifier -> parameters.

        Returns:
            List of validation errors, empty if configuration is valid.
        """
        errors: list[FieldValidationError] = []

        if not isinstance(validator_configuration, Mapping):
            errors.append(FieldValidationError(
                'Validator configuration must be a mapping',
                code='invalid_configuration',
            ))
            return errors

        for validator_identifier, parameters in validator_configuration.items():
            if validator_identifier != FILE_SIZE_VALIDATOR:
                errors.append(FieldValidationError(
                    "Validator '%validator%' is unknown",
                    parameters={'validator': validator_identifier},
                    code='unknown_validator',
                ))
                continue

            max_file_size = _get_parameter(parameters, MAX_FILE_SIZE_PARAMETER)
            if max_file_size is None:
                errors.append(FieldValidationError(
                    'Validator %validator% expects parameter '
                    '%parameter% to be set.',
                    parameters={
                        'validator': validator_identifier,
                        'parameter': MAX_FILE_SIZE_PARAMETER,
                    },
                    code='missing_parameter',
                ))
            elif max_file_size is not False and not is_int(max_file_size):
                errors.append(FieldValidationError(
                    'Validator %validator% expects parameter '
                    '%parameter% to be of %type%.',
                    parameters={
                        'validator': validator_identifier,
                        'parameter': MAX_FILE_SIZE_PARAMETER,
                        'type': 'integer',
                    },
                    code='wrong_type',
                ))

        return errors

    def apply_default_validator_configuration(
        self,
        validator_configuration: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        """Fill missing validators and parameters with schema defaults.

        Args:
            validator_configuration: Configuration to complete, may be None.

        Returns:
            New configuration dict; the argument is left untouched.
        """
        configuration = copy.deepcopy(dict(validator_configuration or {}))

        for validator_identifier, schema in self.validator_configuration_schema.items():
            parameters = configuration.setdefault(validator_identifier, {})
            for parameter_name, parameter_schema in schema.items():
                parameters.setdefault(parameter_name, parameter_schema['default'])

        return configuration

    def validate_field_settings(
        self,
        field_settings: Mapping[str, Any],
    ) -> list[FieldValidationError]:
        """Validate field settings of a field definition.

        Args:
            field_settings: Setting name -> value.

        Returns:
            List of validation errors, one per unknown setting.
        """
        errors: list[FieldValidationError] = []

        if not isinstance(field_settings, Mapping):
            errors.append(FieldValidationError(
                'Field settings must be a mapping',
                code='invalid_settings',
            ))
            return errors

        for setting_name in field_settings:
            if setting_name not in self.settings_schema:
                errors.append(FieldValidationError(
                    "Setting '%setting%' is unknown",
                    parameters={'setting': setting_name},
                    code='unknown_setting',
                ))

        return errors

    def apply_default_field_settings(
        self,
        field_settings: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        """Fill missing settings with schema defaults.

        Args:
            field_settings: Settings to complete, may be None.

        Returns:
            New settings dict.
        """
        result = dict(field_settings or {})
        for setting_name, setting_schema in self.settings_schema.items():
            result.setdefault(setting_name, setting_schema['default'])
        return result

    def to_hash(self, value: BinaryBaseValue) -> dict[str, Any]:
        """Convert value to its flat hash form.

        Args:
            value: Field value.

        Returns:
            Mapping of hash key -> attribute value.
        """
        return {
            key: getattr(value, attribute)
            for key, attribute in self.value_class.hash_keys.items()
        }

    def from_hash(self, hash_value: Mapping[str, Any] | None) -> BinaryBaseValue:
        """Build value from hash form.

        Args:
            hash_value: Hash produced by :meth:`to_hash`, or None.

        Returns:
            The empty value for None, a completed value otherwise.
        """
        if hash_value is None:
            return self.get_empty_value()

        value = self.create_value(hash_value)
        self.complete_value(value)
        return value

    def to_persistence_value(self, value: BinaryBaseValue) -> PersistenceValue:
        """Convert value to a persistence record.

        The whole value goes to ``external_data`` for the external file
        storage to process.

        Args:
            value: Field value.

        Returns:
            Persistence record.
        """
        return PersistenceValue(
            data=None,
            external_data=self.to_hash(value),
            sort_key=self.get_sort_info(value),
        )

    def from_persistence_value(
        self,
        persistence_value: PersistenceValue,
    ) -> BinaryBaseValue:
        """Rebuild value from a persistence record.

        Keys in ``external_data`` that this type does not know are
        ignored.

        Args:
            persistence_value: Record loaded from storage.

        Returns:
            Field value.
        """
        external_data = persistence_value.external_data or {}
        return self.from_hash({
            key: external_data.get(key)
            for key in self.value_class.hash_keys
        })
