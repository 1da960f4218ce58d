# core/utils_tema.py
from django.conf import settings

COOKIE_TEMA = "tema"
TEMAS_VALIDOS = ("light", "dark")
# Um ano
DURACAO_COOKIE_TEMA = 365 * 24 * 60 * 60


def obter_tema(request):
    tema = request.COOKIES.get(COOKIE_TEMA) or getattr(settings, "TEMA_PADRAO", "light")
    return tema if tema in TEMAS_VALIDOS else "light"


def tema_oposto(tema):
    return "light" if tema == "dark" else "dark"
