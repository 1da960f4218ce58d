from datetime import date

import pytest

from agentes_app.backends import usuario_para_agente
from agentes_app.models import (
    Agente,
    ESTADO_CIVIL_CASADO,
    FUNCAO_AGENTE,
    FUNCAO_COORDENADOR,
    SETOR_COORDENADOR,
    SETOR_PRE_MATRIMONIAL,
)


@pytest.fixture(autouse=True)
def ambiente_de_teste(settings, tmp_path):
    # Sem logo remoto (nada de rede) e uploads numa pasta temporária
    settings.LOGO_RELATORIO_URL = ""
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }


@pytest.fixture
def fabrica_agente(db):
    def criar(**kwargs):
        dados = {
            "login": "MARIA",
            "nome_completo": "Maria da Silva",
            "data_nascimento": date(1980, 3, 15),
            "estado_civil": ESTADO_CIVIL_CASADO,
            "nome_conjuge": "José da Silva",
            "data_casamento": date(2000, 6, 10),
            "telefone": "(11) 98765-4321",
            "setor": SETOR_PRE_MATRIMONIAL,
            "funcao": FUNCAO_AGENTE,
        }
        dados.update(kwargs)
        return Agente.objects.create(**dados)

    return criar


@pytest.fixture
def coordenador(fabrica_agente):
    agente = fabrica_agente(
        login="COORD",
        nome_completo="Ana Coordenadora",
        data_nascimento=date(1970, 1, 1),
        setor=SETOR_COORDENADOR,
        funcao=FUNCAO_COORDENADOR,
    )
    usuario_para_agente(agente)
    return agente


@pytest.fixture
def agente(fabrica_agente):
    agente = fabrica_agente()
    usuario_para_agente(agente)
    return agente


@pytest.fixture
def cliente_coordenador(client, coordenador):
    client.force_login(coordenador.usuario)
    return client


@pytest.fixture
def cliente_agente(client, agente):
    client.force_login(agente.usuario)
    return client


@pytest.fixture
def dados_formulario():
    """POST mínimo válido para os formulários de agente."""
    def montar(**kwargs):
        dados = {
            "login": "joao.pereira",
            "nome_completo": "João Pereira",
            "data_nascimento": "1985-05-10",
            "estado_civil": "Solteiro(a)",
            "telefone": "11987654321",
            "setor": "Casos Especiais",
            "funcao": "Agente",
        }
        dados.update(kwargs)
        return dados

    return montar
