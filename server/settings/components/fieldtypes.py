"""Binary field type settings."""

from typing import Final

from server.settings.components import config

# Field type identifier -> implementing class
FIELD_TYPES: Final[dict[str, str]] = {
    'ezbinaryfile': 'server.apps.fieldtypes.logic.binary_file.BinaryFileType',
    'ezmedia': 'server.apps.fieldtypes.logic.media.MediaType',
}

# Default for FileSizeValidator.maxFileSize, in MB (0 means no limit)
FIELDTYPES_DEFAULT_MAX_FILE_SIZE_MB = config(
    'FIELDTYPES_DEFAULT_MAX_FILE_SIZE_MB',
    cast=int,
    default=0,
)
