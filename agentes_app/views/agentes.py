# -*- coding: utf-8 -*-
"""
agentes_app/views/agentes.py
Listagem, cadastro, edição e exclusão de agentes.
"""

import logging

from django.contrib import messages
from django.db import DatabaseError, IntegrityError
from django.db.models import Q
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from core.utils_config import get_config, get_logo_relatorio
from core.utils_log import mensagem_de_erro, notificar_erro

from ..acesso import agente_requerido, coordenador_requerido
from ..forms import AgenteForm, AgentePerfilForm
from ..models import (
    Agente,
    ESTADO_CIVIL_CHOICES,
    FUNCAO_AGENTE,
    FUNCAO_CHOICES,
)
from ..pdf_reportlab import carregar_logo, gerar_pdf_fichas
from ..utils import slug_arquivo

logger = logging.getLogger(__name__)

MSG_SEM_PERMISSAO_EDITAR = "Você não tem permissão para editar outros agentes."
MSG_SEM_PERMISSAO_EXCLUIR = "Você não tem permissão para excluir agentes."
MSG_LOGIN_EM_USO = "Este login já está em uso. Por favor, escolha outro."


# ═══════════════════════════════════════════════════════════════════════════════
# FILTROS
# ═══════════════════════════════════════════════════════════════════════════════

def _parametros(request):
    return request.POST if request.method == "POST" else request.GET


def filtrar_agentes(request, agentes_base):
    """
    Aplica os filtros do listado.
    Devolve: (agentes, filtros_context)

    Se vierem ids selecionados (checkboxes do listado), eles restringem
    o resultado aos agentes marcados.
    """
    params = _parametros(request)

    query = params.get("q", "").strip()
    setor = params.get("setor", "").strip()
    estado_civil = params.get("estado_civil", "").strip()
    funcao = params.get("funcao", "").strip()
    ids = [i for i in params.getlist("ids") if str(i).isdigit()]

    agentes = agentes_base

    if query:
        agentes = agentes.filter(
            Q(nome_completo__icontains=query) |
            Q(telefone__contains=query)
        )

    if setor:
        agentes = agentes.filter(setor=setor)
    if estado_civil:
        agentes = agentes.filter(estado_civil=estado_civil)
    if funcao:
        agentes = agentes.filter(funcao=funcao)

    if ids:
        agentes = agentes.filter(pk__in=ids)

    agentes = agentes.order_by("nome_completo")

    setores = sorted(
        s for s in Agente.objects.values_list("setor", flat=True).distinct() if s
    )

    filtros_context = {
        "q": query,
        "setor": setor,
        "estado_civil": estado_civil,
        "funcao": funcao,
        "ids": ids,
        "setores_disponiveis": setores,
        "estados_civis": ESTADO_CIVIL_CHOICES,
        "funcoes": FUNCAO_CHOICES,
    }
    return agentes, filtros_context


# ═══════════════════════════════════════════════════════════════════════════════
# LISTAGEM
# ═══════════════════════════════════════════════════════════════════════════════

@agente_requerido
@require_GET
def lista(request):
    """
    Coordenação: todos os agentes com filtros.
    Agente: só o próprio cartão ('Meu Cadastro').
    """
    agente = request.agente

    if not agente.e_coordenador:
        return render(request, "agentes_app/lista.html", {
            "agentes": [agente],
            "meu_cadastro": True,
        })

    try:
        agentes, filtros_context = filtrar_agentes(request, Agente.objects.all())
        agentes = list(agentes)
    except DatabaseError as e:
        notificar_erro(request, f"Falha ao buscar os dados: {mensagem_de_erro(e)}", "FETCH_DATA")
        agentes, filtros_context = [], {}

    context = {
        "agentes": agentes,
        "total": len(agentes),
        "meu_cadastro": False,
        **filtros_context,
    }
    return render(request, "agentes_app/lista.html", context)


# ═══════════════════════════════════════════════════════════════════════════════
# CADASTRO / EDIÇÃO
# ═══════════════════════════════════════════════════════════════════════════════

def _salvar(request, form, forcar_agente=False):
    """
    Salva o formulário. Devolve o agente ou None se o banco recusar.
    """
    try:
        agente = form.save(commit=False)
        if forcar_agente:
            agente.funcao = FUNCAO_AGENTE
        agente.save()
    except IntegrityError:
        notificar_erro(request, MSG_LOGIN_EM_USO, "SAVE_AGENT")
        return None
    except DatabaseError as e:
        notificar_erro(request, f"Erro ao salvar agente: {mensagem_de_erro(e)}", "SAVE_AGENT")
        return None

    logger.info("Agente %s salvo por %s", agente.pk, request.user.username)
    return agente


@coordenador_requerido
@require_http_methods(["GET", "POST"])
def criar(request):
    if request.method == "POST":
        form = AgenteForm(request.POST, request.FILES)
        if form.is_valid():
            if _salvar(request, form):
                messages.success(request, "Agente salvo com sucesso!")
                return redirect("agentes_app:lista")
        else:
            messages.error(request, "Há erros no formulário. Revise os campos destacados.")
    else:
        form = AgenteForm()

    return render(request, "agentes_app/agente_form.html", {
        "form": form,
        "modo": "crear",
        "titulo": "Novo Agente",
    })


@agente_requerido
@require_http_methods(["GET", "POST"])
def editar(request, pk):
    agente_logado = request.agente
    agente = get_object_or_404(Agente, pk=pk)

    proprio = agente.pk == agente_logado.pk
    if not agente_logado.e_coordenador and not proprio:
        notificar_erro(request, MSG_SEM_PERMISSAO_EDITAR, "SAVE_AGENT")
        return redirect("agentes_app:lista")

    FormClass = AgenteForm if agente_logado.e_coordenador else AgentePerfilForm

    if request.method == "POST":
        form = FormClass(request.POST, request.FILES, instance=agente)
        if form.is_valid():
            if _salvar(request, form, forcar_agente=not agente_logado.e_coordenador):
                messages.success(request, "Agente salvo com sucesso!")
                return redirect("agentes_app:lista")
        else:
            messages.error(request, "Há erros no formulário. Revise os campos destacados.")
    else:
        form = FormClass(instance=agente)

    return render(request, "agentes_app/agente_form.html", {
        "form": form,
        "agente": agente,
        "modo": "editar",
        "titulo": "Meu Cadastro" if proprio else f"Editar {agente.nome_completo}",
    })


@agente_requerido
def meu_cadastro(request):
    return redirect("agentes_app:editar", pk=request.agente.pk)


@agente_requerido
@require_POST
def excluir(request, pk):
    if not request.agente.e_coordenador:
        notificar_erro(request, MSG_SEM_PERMISSAO_EXCLUIR, "DELETE_AGENT")
        return redirect("agentes_app:lista")

    agente = get_object_or_404(Agente, pk=pk)
    nome = agente.nome_completo

    try:
        agente.delete()
    except DatabaseError as e:
        notificar_erro(request, f"Erro ao excluir agente: {mensagem_de_erro(e)}", "DELETE_AGENT")
        return redirect("agentes_app:lista")

    logger.info("Agente '%s' excluído por %s", nome, request.user.username)
    messages.success(request, "Agente excluído com sucesso!")
    return redirect("agentes_app:lista")


# ═══════════════════════════════════════════════════════════════════════════════
# FICHA INDIVIDUAL (PDF)
# ═══════════════════════════════════════════════════════════════════════════════

@agente_requerido
@require_GET
def ficha_pdf(request, pk):
    agente = get_object_or_404(Agente, pk=pk)

    if not request.agente.e_coordenador and agente.pk != request.agente.pk:
        messages.error(request, "Você não tem permissão para acessar esta área.")
        return redirect("agentes_app:lista")

    cfg = get_config()
    try:
        pdf_bytes = gerar_pdf_fichas(
            [agente],
            logo=carregar_logo(get_logo_relatorio()),
            subtitulo=cfg.subtitulo_ficha,
        )
    except Exception as e:
        logger.exception("Erro ao gerar a ficha do agente %s", agente.pk)
        notificar_erro(request, f"Ocorreu um erro ao gerar o PDF: {mensagem_de_erro(e)}", "EXPORT_PDF")
        return redirect("agentes_app:lista")

    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = f'attachment; filename="ficha_{slug_arquivo(agente.nome_completo)}.pdf"'
    return response
