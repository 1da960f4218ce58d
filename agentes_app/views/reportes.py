# -*- coding: utf-8 -*-
"""
agentes_app/views/reportes.py
Relatórios, exportações (CSV, Excel, PDF) e aniversariantes do mês.
"""

import csv
import logging
from collections import Counter
from io import BytesIO

from django.contrib import messages
from django.db import DatabaseError
from django.db.models.functions import ExtractDay
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods
from openpyxl import Workbook
from openpyxl.styles import Font

from core.utils_config import get_config, get_logo_relatorio
from core.utils_log import mensagem_de_erro, notificar_erro

from ..acesso import coordenador_requerido
from ..models import (
    Agente,
    ESTADO_CIVIL_CASADO,
    ESTADO_CIVIL_CHOICES,
    SETOR_CHOICES,
)
from ..pdf_reportlab import carregar_logo, gerar_pdf_fichas, gerar_pdf_relatorio
from ..utils import MESES_PT, nome_bodas, porcentagem
from .agentes import filtrar_agentes

logger = logging.getLogger(__name__)

MSG_NADA_PARA_EXPORTAR = "Não há agentes para exportar com os filtros selecionados."

COLUNAS_EXPORTACAO = [
    "Nome Completo",
    "Data de Nascimento",
    "Estado Civil",
    "Nome do Cônjuge",
    "Data de Casamento",
    "Telefone",
    "E-mail",
    "CEP",
    "Endereço",
    "Bairro",
    "Cidade",
    "UF",
    "Possui Veículo",
    "Modelo do Veículo",
    "Paróquia",
    "Comunidade",
    "Setor",
    "Função",
    "Data de Ingresso",
    "Observações",
]


def _data_iso(valor):
    return valor.isoformat() if valor else ""


def linha_exportacao(agente):
    """Uma linha da planilha/CSV, na ordem de COLUNAS_EXPORTACAO."""
    return [
        agente.nome_completo,
        _data_iso(agente.data_nascimento),
        agente.estado_civil,
        agente.nome_conjuge or "",
        _data_iso(agente.data_casamento),
        agente.telefone or "",
        agente.email or "",
        agente.cep or "",
        agente.logradouro or "",
        agente.bairro or "",
        agente.cidade or "",
        agente.uf or "",
        "Sim" if agente.possui_veiculo else "Não",
        agente.modelo_veiculo or "",
        agente.paroquia or "",
        agente.comunidade or "",
        agente.setor,
        agente.funcao,
        _data_iso(agente.data_ingresso),
        agente.observacoes or "",
    ]


def calcular_estatisticas(agentes):
    """
    Totais do relatório:
    - total de agentes, setores com agentes e média por setor (1 casa decimal)
    - contagem por setor e por estado civil, na ordem das opções do cadastro
    """
    agentes = list(agentes)
    total = len(agentes)

    cont_setor = Counter(a.setor for a in agentes if a.setor)
    cont_estado = Counter(a.estado_civil for a in agentes if a.estado_civil)

    ordem_setor = [valor for valor, _ in SETOR_CHOICES]
    ordem_estado = [valor for valor, _ in ESTADO_CIVIL_CHOICES]

    # Valores fora das opções (dados antigos) vão para o fim
    ordem_setor += sorted(s for s in cont_setor if s not in ordem_setor)
    ordem_estado += sorted(e for e in cont_estado if e not in ordem_estado)

    por_setor = [(s, cont_setor[s]) for s in ordem_setor if cont_setor.get(s)]
    por_estado_civil = [(e, cont_estado[e]) for e in ordem_estado if cont_estado.get(e)]

    total_setores = len(por_setor)
    media = round(total / total_setores, 1) if total_setores else 0

    return {
        "total": total,
        "total_setores": total_setores,
        "media_por_setor": media,
        "por_setor": por_setor,
        "por_estado_civil": por_estado_civil,
    }


def _agentes_para_exportar(request):
    agentes, _ = filtrar_agentes(request, Agente.objects.all())
    return list(agentes)


# ═══════════════════════════════════════════════════════════════════════════════
# RELATÓRIOS
# ═══════════════════════════════════════════════════════════════════════════════

@coordenador_requerido
@require_GET
def relatorios(request):
    """Página de relatórios com totais e distribuições."""
    try:
        estatisticas = calcular_estatisticas(Agente.objects.all())
    except DatabaseError as e:
        notificar_erro(request, f"Falha ao buscar os dados: {mensagem_de_erro(e)}", "FETCH_DATA")
        return redirect("agentes_app:lista")

    total = estatisticas["total"]
    context = {
        **estatisticas,
        "tabela_setor": [
            {"nome": n, "quantidade": q, "porcentagem": porcentagem(q, total)}
            for n, q in estatisticas["por_setor"]
        ],
        "tabela_estado_civil": [
            {"nome": n, "quantidade": q, "porcentagem": porcentagem(q, total)}
            for n, q in estatisticas["por_estado_civil"]
        ],
    }
    return render(request, "agentes_app/relatorios.html", context)


@coordenador_requerido
@require_GET
def relatorio_pdf(request):
    try:
        estatisticas = calcular_estatisticas(Agente.objects.all())
        pdf_bytes = gerar_pdf_relatorio(estatisticas, logo=carregar_logo(get_logo_relatorio()))
    except Exception as e:
        logger.exception("Erro ao gerar o relatório em PDF")
        notificar_erro(request, f"Ocorreu um erro ao gerar o PDF: {mensagem_de_erro(e)}", "EXPORT_PDF")
        return redirect("agentes_app:relatorios")

    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = 'attachment; filename="relatorio_pastoral_familiar.pdf"'
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# EXPORTAÇÕES (usam os filtros do listado ou os agentes marcados)
# ═══════════════════════════════════════════════════════════════════════════════

@coordenador_requerido
@require_http_methods(["GET", "POST"])
def exportar_csv(request):
    agentes = _agentes_para_exportar(request)
    if not agentes:
        messages.info(request, MSG_NADA_PARA_EXPORTAR)
        return redirect("agentes_app:lista")

    try:
        response = HttpResponse(content_type="text/csv; charset=utf-8")
        response["Content-Disposition"] = 'attachment; filename="agentes_pastoral_familiar.csv"'
        # BOM para o Excel reconhecer UTF-8
        response.write("\ufeff")

        writer = csv.writer(response, lineterminator="\n")
        writer.writerow(COLUNAS_EXPORTACAO)
        for agente in agentes:
            writer.writerow(linha_exportacao(agente))
    except Exception as e:
        logger.exception("Erro ao exportar CSV")
        notificar_erro(request, f"Erro ao exportar CSV: {mensagem_de_erro(e)}", "EXPORT_CSV")
        return redirect("agentes_app:lista")

    return response


@coordenador_requerido
@require_http_methods(["GET", "POST"])
def exportar_excel(request):
    agentes = _agentes_para_exportar(request)
    if not agentes:
        messages.info(request, MSG_NADA_PARA_EXPORTAR)
        return redirect("agentes_app:lista")

    wb = Workbook()
    ws = wb.active
    ws.title = "Agentes"

    ws.append(COLUNAS_EXPORTACAO)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for agente in agentes:
        ws.append(linha_exportacao(agente))

    # Ajustar largura das colunas
    for column_cells in ws.columns:
        max_length = 0
        column = column_cells[0].column_letter
        for cell in column_cells:
            if cell.value:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[column].width = min(max_length + 2, 40)

    output = BytesIO()
    wb.save(output)
    output.seek(0)

    response = HttpResponse(
        output.getvalue(),
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    response["Content-Disposition"] = 'attachment; filename="agentes_pastoral_familiar.xlsx"'
    return response


@coordenador_requerido
@require_http_methods(["GET", "POST"])
def exportar_fichas_pdf(request):
    agentes = _agentes_para_exportar(request)
    if not agentes:
        messages.info(request, MSG_NADA_PARA_EXPORTAR)
        return redirect("agentes_app:lista")

    cfg = get_config()
    try:
        pdf_bytes = gerar_pdf_fichas(
            agentes,
            logo=carregar_logo(get_logo_relatorio()),
            subtitulo=cfg.subtitulo_ficha,
        )
    except Exception as e:
        logger.exception("Erro ao gerar as fichas em PDF")
        notificar_erro(request, f"Ocorreu um erro ao gerar o PDF: {mensagem_de_erro(e)}", "EXPORT_PDF")
        return redirect("agentes_app:lista")

    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = 'attachment; filename="fichas_cadastrais.pdf"'
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# ANIVERSARIANTES DO MÊS
# ═══════════════════════════════════════════════════════════════════════════════

@coordenador_requerido
@require_GET
def aniversariantes(request):
    """Aniversários de nascimento e de casamento (com as bodas) de um mês."""
    hoje = timezone.localdate()

    mes_str = request.GET.get("mes", "").strip()
    mes = int(mes_str) if mes_str.isdigit() and 1 <= int(mes_str) <= 12 else hoje.month
    ano = hoje.year

    nascimentos = list(
        Agente.objects.filter(data_nascimento__month=mes)
        .annotate(dia=ExtractDay("data_nascimento"))
        .order_by("dia", "nome_completo")
    )
    for a in nascimentos:
        a.idade_que_completa = ano - a.data_nascimento.year

    casamentos = list(
        Agente.objects.filter(
            estado_civil=ESTADO_CIVIL_CASADO,
            data_casamento__isnull=False,
            data_casamento__month=mes,
        )
        .annotate(dia=ExtractDay("data_casamento"))
        .order_by("dia", "nome_completo")
    )
    for a in casamentos:
        anos = ano - a.data_casamento.year
        a.anos_que_completa = anos
        a.nome_bodas = nome_bodas(anos)

    context = {
        "nascimentos": nascimentos,
        "casamentos": casamentos,
        "mes": mes,
        "ano": ano,
        "nome_mes": MESES_PT.get(mes, ""),
        "meses": sorted(MESES_PT.items()),
    }
    return render(request, "agentes_app/aniversariantes.html", context)
