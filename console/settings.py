"""
Django settings for the restaurant admin console.

Every remote-facing value comes from the environment; see CONSOLE_* below.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ('1', 'true', 'yes', 'on')


def env_list(name, default=''):
    return [value.strip() for value in os.environ.get(name, default).split(',') if value.strip()]


SECRET_KEY = os.environ.get('CONSOLE_SECRET_KEY', 'django-insecure-console-dev-key')

DEBUG = env_bool('CONSOLE_DEBUG')

ALLOWED_HOSTS = env_list('CONSOLE_ALLOWED_HOSTS', 'localhost,127.0.0.1')

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'rest_framework',
    'console.apps.accounts',
    'console.apps.users',
    'console.apps.entities',
    'console.apps.branches',
    'console.apps.menu',
    'console.apps.inventory',
    'console.apps.orders',
    'console.apps.reservations',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'console.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'console.wsgi.application'
ASGI_APPLICATION = 'console.asgi.application'

# The console keeps no records of its own; the database holds only sessions.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'console.sqlite3',
    }
}

# Remote API tokens are held in the session; the cookie carries only the session key
SESSION_ENGINE = 'django.contrib.sessions.backends.cached_db'
SESSION_CACHE_ALIAS = 'sessions'
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = not DEBUG
SESSION_COOKIE_AGE = 60 * 60 * 12
SESSION_COOKIE_SAMESITE = 'Strict'

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'console-query-cache',
    },
    'sessions': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'console-sessions',
    },
}

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'console.utils.permissions.HasApiSession',
        'console.utils.permissions.HasBranchAccess',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.MultiPartParser',
        'rest_framework.parsers.FormParser',
    ],
    'UNAUTHENTICATED_USER': None,
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Remote restaurant platform API
CONSOLE_API_BASE_URL = os.environ.get('CONSOLE_API_BASE_URL', 'http://localhost:5000')
CONSOLE_API_TIMEOUT = float(os.environ.get('CONSOLE_API_TIMEOUT', '30'))

CONSOLE_QUERY_CACHE_TIMEOUT = int(os.environ.get('CONSOLE_QUERY_CACHE_TIMEOUT', '300'))
CONSOLE_DEFAULT_CURRENCY = os.environ.get('CONSOLE_DEFAULT_CURRENCY', 'PKR')
