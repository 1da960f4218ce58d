# -*- coding: utf-8 -*-
"""
agentes_app/views/whatsapp.py
Envio de mensagens em massa pelo WhatsApp (wa.me), um agente por vez.
"""

import logging
import uuid

from django.contrib import messages
from django.db import DatabaseError, transaction
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from core.utils_config import get_ddi_padrao, get_saudacao_whatsapp
from core.utils_log import mensagem_de_erro, notificar_erro

from ..acesso import coordenador_requerido
from ..models import Agente, EnvioWhatsApp
from ..utils import normalizar_telefone_whatsapp, personalizar_mensagem
from .agentes import filtrar_agentes

logger = logging.getLogger(__name__)

MSG_NENHUM_SELECIONADO = "Nenhum agente selecionado para enviar mensagem."


def criar_lote(agentes, modelo, criado_por=None, ddi="55"):
    """
    Cria um envio pendente por agente, todos com o mesmo lote.
    Agentes sem telefone são ignorados.
    Devolve (lote, quantidade_criada).
    """
    lote = uuid.uuid4()
    envios = []

    for agente in agentes:
        telefone = normalizar_telefone_whatsapp(agente.telefone, ddi=ddi)
        if not telefone:
            logger.info("Agente %s sem telefone; fora do envio %s", agente.pk, lote)
            continue
        envios.append(EnvioWhatsApp(
            lote=lote,
            agente=agente,
            telefone=telefone,
            mensagem=personalizar_mensagem(modelo, agente.nome_completo),
            criado_por=criado_por,
        ))

    with transaction.atomic():
        EnvioWhatsApp.objects.bulk_create(envios)

    return lote, len(envios)


@coordenador_requerido
@require_http_methods(["GET", "POST"])
def whatsapp_novo(request):
    """
    GET: mostra os agentes selecionados e a mensagem ({nome} = primeiro nome).
    POST: cria o lote e vai para a página de envio.
    """
    agentes, filtros_context = filtrar_agentes(request, Agente.objects.all())

    if request.method == "POST":
        if not filtros_context["ids"]:
            messages.error(request, MSG_NENHUM_SELECIONADO)
            return redirect("agentes_app:lista")

        modelo = request.POST.get("mensagem") or get_saudacao_whatsapp()
        try:
            lote, criados = criar_lote(
                agentes,
                modelo,
                criado_por=request.user,
                ddi=get_ddi_padrao(),
            )
        except DatabaseError as e:
            notificar_erro(request, f"Erro ao preparar o envio: {mensagem_de_erro(e)}", "WHATSAPP")
            return redirect("agentes_app:lista")

        if not criados:
            messages.error(request, MSG_NENHUM_SELECIONADO)
            return redirect("agentes_app:lista")

        messages.info(request, f"Iniciando envio para {criados} agentes.")
        return redirect("agentes_app:whatsapp_lote", lote=lote)

    if not filtros_context["ids"]:
        messages.error(request, MSG_NENHUM_SELECIONADO)
        return redirect("agentes_app:lista")

    return render(request, "agentes_app/whatsapp_novo.html", {
        "agentes": agentes,
        "ids": filtros_context["ids"],
        "mensagem": get_saudacao_whatsapp(),
    })


@coordenador_requerido
@require_GET
def whatsapp_lote(request, lote):
    envios = list(EnvioWhatsApp.objects.select_related("agente").filter(lote=lote))
    if not envios:
        messages.warning(request, "Envio não encontrado.")
        return redirect("agentes_app:lista")

    pendentes = [e for e in envios if e.estado == EnvioWhatsApp.ESTADO_PENDENTE]
    enviados = len(envios) - len(pendentes)

    if not pendentes and request.GET.get("concluido") != "1":
        messages.success(request, f"Processo concluído. {enviados} abas de conversa foram abertas.")
        return redirect(f"{request.path}?concluido=1")

    return render(request, "agentes_app/whatsapp_lote.html", {
        "lote": lote,
        "envios": envios,
        "total_pendentes": len(pendentes),
        "total_enviados": enviados,
    })


@coordenador_requerido
@require_POST
def whatsapp_abrir(request, pk):
    """
    Marca o envio como enviado e abre a conversa no WhatsApp.
    """
    envio = get_object_or_404(EnvioWhatsApp, pk=pk)

    if envio.estado != EnvioWhatsApp.ESTADO_PENDENTE:
        messages.warning(request, "Esta mensagem já foi aberta.")
        return redirect("agentes_app:whatsapp_lote", lote=envio.lote)

    envio.estado = EnvioWhatsApp.ESTADO_ENVIADO
    envio.enviado_em = timezone.now()
    envio.save(update_fields=["estado", "enviado_em"])

    return redirect(envio.link)
