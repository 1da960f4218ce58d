import pytest
from django.urls import reverse

from notificacoes_app.context_processors import notificacoes_context
from notificacoes_app.models import Notificacao
from notificacoes_app.utils import criar_notificacao, notificar_coordenadores

pytestmark = pytest.mark.django_db


def test_criar_notificacao_resolve_nome_de_url(agente):
    notificacao = criar_notificacao(agente.usuario, "Olá", url_name="agentes_app:lista")
    assert notificacao.url_destino == reverse("agentes_app:lista")
    assert notificacao.tipo == "info"
    assert not notificacao.lida


def test_caminho_direto_e_guardado_como_veio(agente):
    notificacao = criar_notificacao(agente.usuario, "Olá", url_name="/agentes/relatorios/")
    assert notificacao.url_destino == "/agentes/relatorios/"


def test_notificar_coordenadores(coordenador, agente, fabrica_agente):
    # Coordenador que nunca entrou não tem usuário
    fabrica_agente(login="SEMUSUARIO", funcao="coordenador")

    assert notificar_coordenadores("Aviso", "Reunião") == 1
    assert Notificacao.objects.get().usuario == coordenador.usuario


def test_context_processor(rf, agente):
    for i in range(7):
        criar_notificacao(agente.usuario, f"Aviso {i}")

    request = rf.get("/")
    request.user = agente.usuario
    contexto = notificacoes_context(request)

    assert contexto["NOTIF_TOTAL_NAO_LIDAS"] == 7
    assert len(contexto["NOTIF_NAO_LIDAS"]) == 5


def test_marcar_todas_lidas(cliente_agente, agente, coordenador):
    criar_notificacao(agente.usuario, "Um")
    criar_notificacao(agente.usuario, "Dois")
    criar_notificacao(coordenador.usuario, "De outro")

    response = cliente_agente.post(reverse("notificacoes_app:marcar_todas_lidas"))

    assert response.json() == {"status": "ok", "marcadas": 2}
    assert Notificacao.objects.filter(lida=False).count() == 1
