"""Settings entry point.

Settings are split into components with ``django-split-settings``.
``DJANGO_ENV`` selects the environment file included last.
"""

from os import environ

import django_stubs_ext
from split_settings.tools import include, optional

# Monkeypatching Django, so stubs will work for all generics
django_stubs_ext.monkeypatch()

_ENV = environ.setdefault('DJANGO_ENV', 'development')

_base_settings = (
    'components/common.py',
    'components/logging.py',
    'components/fieldtypes.py',
    # Select the right env:
    f'environments/{_ENV}.py',
    # Optionally override some settings:
    optional('environments/local.py'),
)

include(*_base_settings)
