from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_POST

from .models import Notificacao


@login_required
@require_POST
def marcar_todas_lidas(request):
    """
    Marca como lidas todas as notificações pendentes do usuário.
    """
    total = Notificacao.objects.filter(usuario=request.user, lida=False).update(lida=True)
    return JsonResponse({"status": "ok", "marcadas": total})
