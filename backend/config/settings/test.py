import copy

from .base import *

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Keep test output quiet; assertLogs still captures records.
LOGGING = copy.deepcopy(LOGGING)
LOGGING['root']['level'] = 'CRITICAL'
LOGGING['loggers']['django']['level'] = 'CRITICAL'
LOGGING['loggers']['verification']['level'] = 'CRITICAL'
