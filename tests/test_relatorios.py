from datetime import date

import pytest
from django.urls import reverse

from agentes_app.models import (
    Agente,
    ESTADO_CIVIL_CASADO,
    ESTADO_CIVIL_SOLTEIRO,
    SETOR_CASOS_ESPECIAIS,
    SETOR_PRE_MATRIMONIAL,
)
from agentes_app.pdf_reportlab import gerar_pdf_relatorio
from agentes_app.utils import nome_bodas
from agentes_app.views import calcular_estatisticas


def test_calcular_estatisticas():
    agentes = [
        Agente(setor=SETOR_CASOS_ESPECIAIS, estado_civil=ESTADO_CIVIL_SOLTEIRO),
        Agente(setor=SETOR_PRE_MATRIMONIAL, estado_civil=ESTADO_CIVIL_CASADO),
        Agente(setor=SETOR_PRE_MATRIMONIAL, estado_civil=ESTADO_CIVIL_CASADO),
    ]

    estatisticas = calcular_estatisticas(agentes)

    assert estatisticas["total"] == 3
    assert estatisticas["total_setores"] == 2
    assert estatisticas["media_por_setor"] == 1.5
    # Ordem das opções do cadastro, não da contagem
    assert estatisticas["por_setor"] == [(SETOR_PRE_MATRIMONIAL, 2), (SETOR_CASOS_ESPECIAIS, 1)]
    assert estatisticas["por_estado_civil"] == [(ESTADO_CIVIL_SOLTEIRO, 1), (ESTADO_CIVIL_CASADO, 2)]


def test_estatisticas_vazias():
    estatisticas = calcular_estatisticas([])
    assert estatisticas["total"] == 0
    assert estatisticas["media_por_setor"] == 0
    assert estatisticas["por_setor"] == []


def test_setor_fora_das_opcoes_vai_para_o_fim():
    agentes = [Agente(setor="Liturgia", estado_civil=ESTADO_CIVIL_CASADO), Agente(setor=SETOR_CASOS_ESPECIAIS)]
    assert calcular_estatisticas(agentes)["por_setor"][-1] == ("Liturgia", 1)


def test_pdf_do_relatorio_sem_dados_ainda_gera():
    pdf = gerar_pdf_relatorio(calcular_estatisticas([]))
    assert pdf.startswith(b"%PDF")


@pytest.mark.django_db
class TestViews:
    def test_pagina_de_relatorios(self, cliente_coordenador, agente):
        response = cliente_coordenador.get(reverse("agentes_app:relatorios"))

        assert response.status_code == 200
        assert response.context["total"] == 2
        linhas = {l["nome"]: l for l in response.context["tabela_setor"]}
        assert linhas[SETOR_PRE_MATRIMONIAL]["porcentagem"] == 50.0

    def test_relatorio_pdf(self, cliente_coordenador, agente):
        response = cliente_coordenador.get(reverse("agentes_app:relatorio_pdf"))

        assert 'filename="relatorio_pastoral_familiar.pdf"' in response["Content-Disposition"]
        assert response.content.startswith(b"%PDF")

    def test_aniversariantes(self, cliente_coordenador, agente, fabrica_agente):
        fabrica_agente(
            login="JULHO",
            nome_completo="Julia",
            data_nascimento=date(1990, 7, 1),
            estado_civil=ESTADO_CIVIL_SOLTEIRO,
        )
        ano = date.today().year

        nascimentos = cliente_coordenador.get(
            reverse("agentes_app:aniversariantes"), {"mes": "3"}
        ).context["nascimentos"]
        assert [a.nome_completo for a in nascimentos] == ["Maria da Silva"]
        assert nascimentos[0].dia == 15
        assert nascimentos[0].idade_que_completa == ano - 1980

        response = cliente_coordenador.get(reverse("agentes_app:aniversariantes"), {"mes": "6"})
        casamentos = response.context["casamentos"]
        assert [a.nome_completo for a in casamentos] == ["Ana Coordenadora", "Maria da Silva"]
        assert casamentos[0].anos_que_completa == ano - 2000
        assert casamentos[0].nome_bodas == nome_bodas(ano - 2000)
        assert response.context["nome_mes"] == "junho"

        julho = cliente_coordenador.get(reverse("agentes_app:aniversariantes"), {"mes": "7"}).context
        assert [a.nome_completo for a in julho["nascimentos"]] == ["Julia"]
        assert julho["casamentos"] == []

    def test_mes_invalido_usa_o_atual(self, cliente_coordenador):
        response = cliente_coordenador.get(reverse("agentes_app:aniversariantes"), {"mes": "13"})
        assert response.context["mes"] == date.today().month
