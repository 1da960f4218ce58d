from django.db import DatabaseError

from .models import Notificacao

LIMITE_MENU = 5


def notificacoes_context(request):
    """Não lidas do usuário logado para o menu (as 5 últimas e o total)."""
    if not request.user.is_authenticated:
        return {}

    pendentes = Notificacao.objects.filter(usuario=request.user, lida=False)
    try:
        total = pendentes.count()
        ultimas = list(pendentes.order_by("-data_criacao")[:LIMITE_MENU]) if total else []
    except DatabaseError:
        return {}

    return {
        "NOTIF_NAO_LIDAS": ultimas,
        "NOTIF_TOTAL_NAO_LIDAS": total,
    }
