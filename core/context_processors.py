import logging

from django.db import DatabaseError

from .models import ConfiguracaoSistema
from .utils_tema import obter_tema

logger = logging.getLogger(__name__)


def configuracao_global(request):
    """
    Envia a configuração do sistema, o tema e o agente logado
    para TODOS os templates.

    Sem banco (ou sem migrações) usa a configuração padrão, não salva,
    para que a página de diagnóstico ainda possa ser mostrada.
    """
    try:
        config = ConfiguracaoSistema.load()
    except DatabaseError:
        logger.warning("Configuração indisponível; usando valores padrão")
        config = ConfiguracaoSistema()

    agente = None
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        try:
            agente = getattr(user, "agente", None)
        except DatabaseError:
            agente = None

    return {
        "CFG": config,
        "TEMA": obter_tema(request),
        "AGENTE_LOGADO": agente,
        "E_COORDENADOR": bool(agente and agente.e_coordenador),
    }
