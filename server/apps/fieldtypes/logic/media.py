"""Field type for media files (audio and video)."""

from collections.abc import Mapping
from typing import Any, Final, final, override

from server.apps.fieldtypes.exceptions import InvalidArgumentTypeError
from server.apps.fieldtypes.logic.binary_base import BinaryBaseType, is_int
from server.apps.fieldtypes.validation import FieldValidationError
from server.apps.fieldtypes.values import BinaryBaseValue, MediaValue

MEDIA_TYPE_SETTING: Final = 'mediaType'

MEDIA_TYPES: Final = frozenset((
    'flash',
    'quick_time',
    'real_player',
    'silverlight',
    'windows_media_player',
    'html5_video',
    'html5_audio',
))

# Player options that fall back to their defaults when given as None
_PLAYER_OPTION_KEYS: Final = frozenset((
    'hasController',
    'autoplay',
    'loop',
    'width',
    'height',
))

_BOOL_OPTIONS: Final = ('has_controller', 'autoplay', 'loop')
_INT_OPTIONS: Final = ('width', 'height')


@final
class MediaType(BinaryBaseType):
    """Media file with player options (controller, autoplay, size...)."""

    identifier = 'ezmedia'
    value_class = MediaValue

    settings_schema = {
        MEDIA_TYPE_SETTING: {
            'type': 'choice',
            'default': 'html5_video',
        },
    }

    @override
    def create_value(self, input_value: Mapping[str, Any]) -> MediaValue:
        """Create MediaValue, defaulting player options given as None."""
        return self.build_value({  # type: ignore[return-value]
            key: key_value
            for key, key_value in input_value.items()
            if not (key in _PLAYER_OPTION_KEYS and key_value is None)
        })

    @override
    def check_value_structure(self, value: BinaryBaseValue) -> None:
        """Check base structure plus player option types."""
        super().check_value_structure(value)

        for attribute in _BOOL_OPTIONS:
            option = getattr(value, attribute)
            if not isinstance(option, bool):
                raise InvalidArgumentTypeError(
                    f'value.{attribute}',
                    'bool',
                    option,
                )

        for attribute in _INT_OPTIONS:
            option = getattr(value, attribute)
            if not is_int(option):
                raise InvalidArgumentTypeError(
                    f'value.{attribute}',
                    'int',
                    option,
                )

    @override
    def validate_field_settings(
        self,
        field_settings: Mapping[str, Any],
    ) -> list[FieldValidationError]:
        """Validate settings, ``mediaType`` must be a known player type."""
        errors = super().validate_field_settings(field_settings)
        if not isinstance(field_settings, Mapping):
            return errors

        media_type = field_settings.get(MEDIA_TYPE_SETTING)
        if MEDIA_TYPE_SETTING in field_settings and media_type not in MEDIA_TYPES:
            errors.append(FieldValidationError(
                "Setting '%setting%' is of unknown type",
                parameters={'setting': MEDIA_TYPE_SETTING},
                code='unknown_media_type',
            ))

        return errors
