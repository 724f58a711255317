"""Field type for generic binary files."""

from collections.abc import Mapping
from typing import Any, final, override

from server.apps.fieldtypes.logic.binary_base import BinaryBaseType
from server.apps.fieldtypes.values import BinaryFileValue


@final
class BinaryFileType(BinaryBaseType):
    """Binary file attached to a content item (any MIME type)."""

    identifier = 'ezbinaryfile'
    value_class = BinaryFileValue

    @override
    def create_value(self, input_value: Mapping[str, Any]) -> BinaryFileValue:
        """Create BinaryFileValue from hash-style input."""
        return self.build_value(input_value)  # type: ignore[return-value]
