# -*- coding: utf-8 -*-
"""
agentes_app/views/api.py
Endpoints JSON usados pelos formulários.
"""

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from core.utils_log import registrar_erro

from ..cep import CepErro, buscar_cep


@require_GET
def api_buscar_cep(request):
    """
    Preenche o endereço a partir do CEP (no blur do campo).
    Público: também é usado no primeiro cadastro.
    """
    cep = request.GET.get("cep", "")

    try:
        endereco = buscar_cep(cep)
    except CepErro as e:
        registrar_erro(request, str(e), "CEP")
        return JsonResponse({"ok": False, "erro": str(e)}, status=400)

    return JsonResponse({"ok": True, **endereco})
