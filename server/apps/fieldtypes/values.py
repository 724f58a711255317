"""Value objects handled by binary field types."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, final


@dataclass
class BinaryBaseValue:
    """In-memory value of a binary field.

    A value is only complete once ``path`` points to an existing file.
    Field types fill ``file_name`` and ``file_size`` from disk when they
    are unset, and never recompute them afterwards.
    """

    # Hash key -> attribute name, used for hash and persistence mapping
    hash_keys: ClassVar[dict[str, str]] = {
        'fileName': 'file_name',
        'fileSize': 'file_size',
        'path': 'path',
        'mimeType': 'mime_type',
    }

    path: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    mime_type: str | None = None

    def __str__(self) -> str:
        """String representation."""
        return self.file_name or ''


@final
@dataclass
class BinaryFileValue(BinaryBaseValue):
    """Value of a generic binary file field."""


@final
@dataclass
class MediaValue(BinaryBaseValue):
    """Value of a media field (audio/video with player options)."""

    hash_keys: ClassVar[dict[str, str]] = {
        **BinaryBaseValue.hash_keys,
        'hasController': 'has_controller',
        'autoplay': 'autoplay',
        'loop': 'loop',
        'width': 'width',
        'height': 'height',
    }

    has_controller: bool = False
    autoplay: bool = False
    loop: bool = False
    width: int = 0
    height: int = 0


@final
@dataclass(frozen=True)
class PersistenceValue:
    """Storage-layer record of a field value.

    Binary values keep nothing in ``data``: the whole value travels in
    ``external_data`` for the external storage to handle.
    """

    data: Any = None
    external_data: dict[str, Any] = field(default_factory=dict)
    sort_key: Any = False
