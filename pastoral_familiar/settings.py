"""
Django settings for pastoral_familiar project.
Configuração para desenvolvimento local e produção no Render.
"""
import os
from pathlib import Path

import dj_database_url

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# SEGURANÇA - CREDENCIAIS EM VARIÁVEIS DE AMBIENTE
# =============================================================================

SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-trocar-em-producao")

# DEBUG automático: "0" no Render, "1" local
DEBUG = os.environ.get("DEBUG", "1") == "1"

ALLOWED_HOSTS = [
    "pastoral-familiar.onrender.com",
    ".onrender.com",
    "127.0.0.1",
    "localhost",
    "testserver",
]

CSRF_TRUSTED_ORIGINS = [
    "https://pastoral-familiar.onrender.com",
    "https://*.onrender.com",
]

# =============================================================================
# APLICAÇÕES
# =============================================================================

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "core",
    "agentes_app",
    "notificacoes_app",
    "cloudinary",
    "cloudinary_storage",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",  # WhiteNoise ANTES dos outros
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

AUTHENTICATION_BACKENDS = [
    "agentes_app.backends.LoginDataNascimentoBackend",
    "django.contrib.auth.backends.ModelBackend",
]

ROOT_URLCONF = "pastoral_familiar.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "core.context_processors.configuracao_global",
                "notificacoes_app.context_processors.notificacoes_context",
            ],
        },
    },
]

WSGI_APPLICATION = "pastoral_familiar.wsgi.application"

# =============================================================================
# BANCO DE DADOS
# =============================================================================

DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=600,
    )
}

# No Render, forçar SSL para PostgreSQL
if os.environ.get("RENDER"):
    DATABASES["default"]["OPTIONS"] = {"sslmode": "require"}

# =============================================================================
# INTERNACIONALIZAÇÃO
# =============================================================================

LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = True

# =============================================================================
# CONFIGURAÇÃO ESPECÍFICA DA APLICAÇÃO
# =============================================================================

# Código do país usado nos links wa.me quando o telefone não traz DDI
DDI_PADRAO_WHATSAPP = "55"

# Busca de endereço pelo CEP (BrasilAPI)
CEP_API_URL = "https://brasilapi.com.br/api/cep/v1/{cep}"
CEP_API_TIMEOUT = 8

# Logo usado nos PDFs quando a configuração não tem logo próprio
LOGO_RELATORIO_URL = os.environ.get(
    "LOGO_RELATORIO_URL",
    "https://static.wixstatic.com/media/efbd1a_7566647af4c94efca85aacf26f0a4228~mv2_d_1920_1920_s_2.png",
)

TEMA_PADRAO = "light"

# =============================================================================
# ARQUIVOS ESTÁTICOS
# =============================================================================

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# =============================================================================
# ARQUIVOS MEDIA (fotos dos agentes)
# =============================================================================

MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

# =============================================================================
# CLOUDINARY (MEDIA NA NUVEM)
# =============================================================================

CLOUDINARY_STORAGE = {
    "CLOUD_NAME": os.environ.get("CLOUDINARY_CLOUD_NAME", ""),
    "API_KEY": os.environ.get("CLOUDINARY_API_KEY", ""),
    "API_SECRET": os.environ.get("CLOUDINARY_API_SECRET", ""),
}

_use_cloudinary = all([
    os.environ.get("CLOUDINARY_CLOUD_NAME"),
    os.environ.get("CLOUDINARY_API_KEY"),
    os.environ.get("CLOUDINARY_API_SECRET"),
])

STORAGES = {
    "default": {
        "BACKEND": "cloudinary_storage.storage.MediaCloudinaryStorage"
        if _use_cloudinary
        else "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedStaticFilesStorage",
    },
}

# =============================================================================
# AUTENTICAÇÃO
# =============================================================================

LOGIN_URL = "agentes_app:login"
LOGIN_REDIRECT_URL = "agentes_app:lista"
LOGOUT_REDIRECT_URL = "agentes_app:login"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simples": {
            "format": "{asctime} {levelname} [{name}] {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simples",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "pastoral_familiar": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "agentes_app": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "notificacoes_app": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# =============================================================================
# CONFIGURAÇÃO ADICIONAL
# =============================================================================

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

if not DEBUG:
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
    SECURE_SSL_REDIRECT = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

    SECURE_CONTENT_TYPE_NOSNIFF = True
    X_FRAME_OPTIONS = "DENY"
