from datetime import timedelta
from os import environ as ENV

from .common import (BASE_DIR, INSTALLED_APPS, MIDDLEWARE, DATABASES,
                     STATIC_URL, SECRET_KEY, ROOT_URLCONF, TEMPLATES,
                     WSGI_APPLICATION, DEBUG, ALLOWED_HOSTS,
                     AUTH_PASSWORD_VALIDATORS, LANGUAGE_CODE, TIME_ZONE,
                     USE_I18N, USE_TZ, DEFAULT_AUTO_FIELD,
                     MEDIA_ROOT, MEDIA_URL, STATIC_ROOT, CSRF_TRUSTED_ORIGINS)

DEBUG = DEBUG
BASE_DIR = BASE_DIR
_MIDDLEWARE = MIDDLEWARE
DATABASES = DATABASES
STATIC_URL = STATIC_URL
SECRET_KEY = SECRET_KEY
ROOT_URLCONF = ROOT_URLCONF
TEMPLATES = TEMPLATES
WSGI_APPLICATION = WSGI_APPLICATION
ALLOWED_HOSTS = ALLOWED_HOSTS
AUTH_PASSWORD_VALIDATORS = AUTH_PASSWORD_VALIDATORS
LANGUAGE_CODE = LANGUAGE_CODE
TIME_ZONE = TIME_ZONE
USE_I18N = USE_I18N
USE_TZ = USE_TZ
DEFAULT_AUTO_FIELD = DEFAULT_AUTO_FIELD
MEDIA_ROOT = MEDIA_ROOT
MEDIA_URL = MEDIA_URL
STATIC_ROOT = STATIC_ROOT
CSRF_TRUSTED_ORIGINS = CSRF_TRUSTED_ORIGINS

INSTALLED_APPS = INSTALLED_APPS + [
    "corsheaders",
    'rest_framework',
    'builder',
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    *_MIDDLEWARE,
]

# Allow specific domains for CORS
CORS_ALLOWED_ORIGINS = [
    origin for origin in ENV.get('CORS_ALLOWED_ORIGINS', 'http://localhost:5173').split(',') if origin
]

# Alternatively, for dev only (NOT for production):
CORS_ALLOW_ALL_ORIGINS = ENV.get('CORS_ALLOW_ALL_ORIGINS', str(DEBUG)) == 'True'


REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated'
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
        'rest_framework.authentication.BasicAuthentication',
    ),
}


SIMPLE_JWT = {
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': SECRET_KEY,
    'VERIFYING_KEY': None,
    'AUTH_HEADER_TYPES': ('Bearer', 'JWT',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'uid',
    'TOKEN_TYPE_CLAIM': 'typ',
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=int(ENV.get('ACCESS_TOKEN_MINUTES', 60))),
    'REFRESH_TOKEN_LIFETIME': timedelta(weeks=2),
}


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {asctime} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'builder': {
            'handlers': ['console'],
            'level': ENV.get('BUILDER_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}

if ENV.get('DJANGO_LOG_FILE'):
    LOGGING['handlers']['file'] = {
        'level': 'INFO',
        'class': 'logging.FileHandler',
        'filename': ENV['DJANGO_LOG_FILE'],
        'formatter': 'simple',
    }
    for logger_config in LOGGING['loggers'].values():
        logger_config['handlers'].append('file')


# App packaging
BUNDLE_ID = ENV.get('BUNDLE_ID', 'com.visios.nocode')
DEFAULT_APP_VERSION = ENV.get('DEFAULT_APP_VERSION', '1.0.1')
FLUTTER_SDK_CONSTRAINT = ENV.get('FLUTTER_SDK_CONSTRAINT', '>=3.0.0 <4.0.0')
PACKAGING_OUTPUT_DIR = ENV.get(
    'PACKAGING_OUTPUT_DIR',
    str(BASE_DIR / 'media' / 'flutter_projects')
)
