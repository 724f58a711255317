"""Management command to re-check stored field definitions."""

import logging
from typing import Any

from django.core.management.base import BaseCommand

from server.apps.fieldtypes.logic.definition_operations import (
    find_invalid_definitions,
)
from server.apps.fieldtypes.models import FieldDefinition

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Report field definitions whose configuration is no longer valid."""

    help = 'Check validator configuration and settings of field definitions'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--field-type',
            default=None,
            help='Only check definitions of this field type identifier',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the check command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        field_type = options['field_type']

        definitions = FieldDefinition.objects.all()
        if field_type:
            definitions = definitions.filter(field_type_identifier=field_type)
        total = definitions.count()

        invalid = find_invalid_definitions(field_type)

        for definition, messages in invalid:
            for message in messages:
                self.stderr.write(f'{definition.identifier}: {message}')
            logger.warning(
                'Invalid field definition: %s (ID: %d)',
                definition.identifier,
                definition.id,
            )

        summary = f'Checked {total} field definitions, {len(invalid)} invalid'
        if invalid:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))
