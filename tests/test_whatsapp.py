import uuid

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from agentes_app.models import EnvioWhatsApp
from agentes_app.views import criar_lote

pytestmark = pytest.mark.django_db


def textos(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


def test_criar_lote_ignora_quem_nao_tem_telefone(fabrica_agente):
    maria = fabrica_agente()
    sem_telefone = fabrica_agente(login="SEMFONE", nome_completo="Sem Telefone", telefone="")

    lote, criados = criar_lote([maria, sem_telefone], "Olá, {nome}!")

    assert criados == 1
    envio = EnvioWhatsApp.objects.get(lote=lote)
    assert envio.agente == maria
    assert envio.telefone == "5511987654321"
    assert envio.mensagem == "Olá, Maria!"
    assert envio.estado == EnvioWhatsApp.ESTADO_PENDENTE


class TestEnvio:
    def test_sem_selecao(self, cliente_coordenador):
        response = cliente_coordenador.post(reverse("agentes_app:whatsapp_novo"), {"mensagem": "Oi"})

        assert response.url == reverse("agentes_app:lista")
        assert "Nenhum agente selecionado para enviar mensagem." in textos(response)
        assert not EnvioWhatsApp.objects.exists()

    def test_tela_de_mensagem(self, cliente_coordenador, agente):
        response = cliente_coordenador.get(
            reverse("agentes_app:whatsapp_novo"), {"ids": [str(agente.pk)]}
        )

        assert response.status_code == 200
        assert list(response.context["agentes"]) == [agente]
        assert "{nome}" in response.context["mensagem"]

    def test_fluxo_completo(self, cliente_coordenador, agente, coordenador):
        response = cliente_coordenador.post(
            reverse("agentes_app:whatsapp_novo"),
            {"ids": [str(agente.pk), str(coordenador.pk)], "mensagem": "Olá, {nome}! Reunião sábado."},
        )

        assert "Iniciando envio para 2 agentes." in textos(response)
        envios = list(EnvioWhatsApp.objects.all())
        assert len({e.lote for e in envios}) == 1
        assert all(e.criado_por == coordenador.usuario for e in envios)
        url_lote = reverse("agentes_app:whatsapp_lote", args=[envios[0].lote])
        assert response.url == url_lote

        pagina = cliente_coordenador.get(url_lote)
        assert pagina.context["total_pendentes"] == 2

        for envio in envios:
            aberto = cliente_coordenador.post(reverse("agentes_app:whatsapp_abrir", args=[envio.pk]))
            assert aberto.url.startswith(f"https://wa.me/{envio.telefone}?text=Ol%C3%A1%2C%20")

        assert not EnvioWhatsApp.objects.filter(estado=EnvioWhatsApp.ESTADO_PENDENTE).exists()
        assert all(e.enviado_em for e in EnvioWhatsApp.objects.all())

        fim = cliente_coordenador.get(url_lote)
        assert fim.url == f"{url_lote}?concluido=1"
        assert "Processo concluído. 2 abas de conversa foram abertas." in textos(fim)

        assert cliente_coordenador.get(fim.url).status_code == 200

    def test_abrir_duas_vezes(self, cliente_coordenador, agente):
        lote, _ = criar_lote([agente], "Oi")
        envio = EnvioWhatsApp.objects.get(lote=lote)

        cliente_coordenador.post(reverse("agentes_app:whatsapp_abrir", args=[envio.pk]))
        response = cliente_coordenador.post(reverse("agentes_app:whatsapp_abrir", args=[envio.pk]))

        assert response.url == reverse("agentes_app:whatsapp_lote", args=[lote])
        assert "Esta mensagem já foi aberta." in textos(response)

    def test_get_nao_marca_como_enviado(self, cliente_coordenador, agente):
        lote, _ = criar_lote([agente], "Oi")
        envio = EnvioWhatsApp.objects.get(lote=lote)

        response = cliente_coordenador.get(reverse("agentes_app:whatsapp_abrir", args=[envio.pk]))

        assert response.status_code == 405
        envio.refresh_from_db()
        assert envio.estado == EnvioWhatsApp.ESTADO_PENDENTE
        assert envio.enviado_em is None

    def test_lote_inexistente(self, cliente_coordenador):
        response = cliente_coordenador.get(reverse("agentes_app:whatsapp_lote", args=[uuid.uuid4()]))
        assert response.url == reverse("agentes_app:lista")

    def test_agente_comum_nao_envia(self, cliente_agente, agente):
        cliente_agente.post(reverse("agentes_app:whatsapp_novo"), {"ids": [str(agente.pk)]})
        assert not EnvioWhatsApp.objects.exists()
