"""Shared fixtures for fieldtypes app tests."""

import pytest

from server.apps.fieldtypes.logic.binary_file import BinaryFileType
from server.apps.fieldtypes.logic.media import MediaType
from server.apps.fieldtypes.models import FieldDefinition


@pytest.fixture
def binary_file_type():
    """Binary file field type.

    Returns:
        BinaryFileType instance.
    """
    return BinaryFileType()


@pytest.fixture
def media_type():
    """Media field type.

    Returns:
        MediaType instance.
    """
    return MediaType()


@pytest.fixture
def sample_content():
    """Sample file content for testing.

    Returns:
        Bytes written to sample files.
    """
    return b'%PDF-1.4 sample report content'


@pytest.fixture
def sample_file(tmp_path, sample_content):
    """Create a small file on disk.

    Returns:
        Path of the file as string.
    """
    file_path = tmp_path / 'report.pdf'
    file_path.write_bytes(sample_content)
    return str(file_path)


@pytest.fixture
def make_definition():
    """Factory for unsaved field definitions.

    Returns:
        Callable building FieldDefinition instances.
    """
    def factory(
        validator_configuration=None,
        field_type_identifier='ezbinaryfile',
        field_settings=None,
    ):
        return FieldDefinition(
            identifier='attachment',
            name='Attachment',
            field_type_identifier=field_type_identifier,
            validator_configuration=validator_configuration or {},
            field_settings=field_settings or {},
        )

    return factory
