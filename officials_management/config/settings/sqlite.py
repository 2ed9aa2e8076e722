from .base import *

# Use file-based SQLite for local development and tests
DEBUG = True
DEBUG_PROPAGATE_EXCEPTIONS = True

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

# Lightweight cache for local dev
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

# Подробное логирование приложений, дублируется в файл
LOGGING['handlers']['file'] = {
    'class': 'logging.FileHandler',
    'filename': BASE_DIR.parent / 'django.log',
    'formatter': 'verbose',
}
LOGGING['loggers']['officials_management']['handlers'] = ['console', 'file']
LOGGING['loggers']['officials_management']['level'] = 'DEBUG'
