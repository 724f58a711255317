"""Structured validation errors returned by field types.

Field types never raise for business rules (size limits, misconfigured
validators). They return a list of :class:`FieldValidationError` and let
the caller decide how to present them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, final

from django.core.exceptions import ValidationError
from django.utils.translation import ngettext


@final
@dataclass(frozen=True, slots=True)
class FieldValidationError:
    """A single validation failure.

    Messages use ``%name%`` placeholders filled from ``parameters``.
    ``plural`` is only set for messages that depend on ``count``.
    """

    singular: str
    plural: str | None = None
    parameters: Mapping[str, Any] = field(default_factory=dict)
    code: str = 'invalid'
    count: int = 1

    def get_message(self) -> str:
        """Render the message with its parameters substituted.

        Returns:
            Rendered message.
        """
        if self.plural is None:
            template = self.singular
        else:
            template = ngettext(self.singular, self.plural, self.count)

        for name, parameter_value in self.parameters.items():
            template = template.replace(f'%{name}%', str(parameter_value))
        return template

    def to_django(self) -> ValidationError:
        """Convert to Django's ValidationError keeping the error code.

        Returns:
            Django ValidationError instance.
        """
        return ValidationError(self.get_message(), code=self.code)

    def __str__(self) -> str:
        """String representation."""
        return self.get_message()
