"""
Django settings for the socialhub project.

Values that differ between environments are read from environment variables;
the defaults below are suitable for local development and the test suite.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


SECRET_KEY = os.getenv(
    "DJANGO_SECRET_KEY",
    "django-insecure-socialhub-development-key-change-me",
)

DEBUG = _env_bool("DJANGO_DEBUG", "true")

ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'social',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'socialhub.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'socialhub.wsgi.application'


DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv("SOCIAL_DB_PATH", str(BASE_DIR / 'db.sqlite3')),
    }
}

AUTH_USER_MODEL = 'social.User'

AUTH_PASSWORD_VALIDATORS = []

LANGUAGE_CODE = 'en-gb'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
MEDIA_URL = '/media/'
MEDIA_ROOT = Path(os.getenv("SOCIAL_MEDIA_ROOT", str(BASE_DIR / 'media')))

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Authentication: signed bearer tokens issued at signup/login, optionally
# Firebase ID tokens when a service account is configured.
_AUTHENTICATION_CLASSES = ['social.authentication.SignedTokenAuthentication']
if _env_bool("SOCIAL_ENABLE_FIREBASE_AUTH"):
    _AUTHENTICATION_CLASSES.append('social.authentication.FirebaseAuthentication')

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': _AUTHENTICATION_CLASSES,
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': 'django.contrib.auth.models.AnonymousUser',
}

SOCIAL_TOKEN_MAX_AGE = int(os.getenv("SOCIAL_TOKEN_MAX_AGE", str(60 * 60 * 24)))
SOCIAL_TOKEN_SALT = os.getenv("SOCIAL_TOKEN_SALT", "social.auth.token")
SOCIAL_FEED_RELATION_LIMIT = int(os.getenv("SOCIAL_FEED_RELATION_LIMIT", "500"))
SOCIAL_MEDIA_UPLOAD_DIR = os.getenv("SOCIAL_MEDIA_UPLOAD_DIR", "uploads")
SOCIAL_SUGGESTED_SAMPLE_SIZE = 10
SOCIAL_SUGGESTED_LIMIT = 2

FIREBASE_SERVICE_ACCOUNT_FILE = os.getenv("FIREBASE_SERVICE_ACCOUNT_FILE")


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'social': {
            'handlers': ['console'],
            'level': os.getenv("SOCIAL_LOG_LEVEL", "INFO"),
            'propagate': False,
        },
    },
}
