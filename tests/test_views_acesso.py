import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from agentes_app.models import Agente, FUNCAO_AGENTE
from core.utils_log import SESSAO_LOG_ERROS
from notificacoes_app.models import Notificacao

pytestmark = pytest.mark.django_db


def textos(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


class TestLogin:
    url = reverse("agentes_app:login")

    def test_entra_com_login_e_data(self, client, fabrica_agente):
        agente = fabrica_agente()

        response = client.post(self.url, {"login": " maria ", "data_nascimento": "15/03/1980"})

        assert response.status_code == 302
        assert response.url == reverse("agentes_app:lista")
        assert "Bem-vindo, Maria!" in textos(response)
        agente.refresh_from_db()
        assert agente.usuario is not None
        assert int(client.session["_auth_user_id"]) == agente.usuario.pk

    def test_credenciais_erradas(self, client, fabrica_agente):
        fabrica_agente()

        response = client.post(self.url, {"login": "MARIA", "data_nascimento": "16/03/1980"})

        assert response.status_code == 200
        assert (
            "Login ou data de nascimento incorretos. "
            "Verifique se o Login está digitado corretamente."
        ) in textos(response)
        assert "_auth_user_id" not in client.session

    def test_campos_em_branco(self, client):
        response = client.post(self.url, {"login": "  ", "data_nascimento": ""})
        assert "Login e data de nascimento são obrigatórios." in textos(response)

    def test_data_mal_formatada(self, client):
        response = client.post(self.url, {"login": "MARIA", "data_nascimento": "1980"})
        assert "Data de nascimento inválida. Use o formato DD/MM/AAAA." in textos(response)

    def test_respeita_next_interno(self, client, fabrica_agente):
        fabrica_agente()
        response = client.post(
            f"{self.url}?next=/agentes/meu-cadastro/",
            {"login": "MARIA", "data_nascimento": "15/03/1980"},
        )
        assert response.url == "/agentes/meu-cadastro/"

    def test_ignora_next_externo(self, client, fabrica_agente):
        fabrica_agente()
        response = client.post(
            f"{self.url}?next=//exemplo.com/",
            {"login": "MARIA", "data_nascimento": "15/03/1980"},
        )
        assert response.url == reverse("agentes_app:lista")

    def test_logado_vai_para_lista(self, cliente_agente):
        response = cliente_agente.get(self.url)
        assert response.status_code == 302


class TestLogout:
    def test_sai_e_mantem_log_de_erros(self, cliente_agente):
        session = cliente_agente.session
        session[SESSAO_LOG_ERROS] = ["2024-01-01T00:00:00 [CEP]: CEP inválido."]
        session.save()

        response = cliente_agente.post(reverse("agentes_app:logout"))

        assert response.url == reverse("agentes_app:login")
        assert "Você saiu do sistema." in textos(response)
        assert "_auth_user_id" not in cliente_agente.session
        assert cliente_agente.session[SESSAO_LOG_ERROS] == [
            "2024-01-01T00:00:00 [CEP]: CEP inválido."
        ]

    def test_get_nao_permitido(self, cliente_agente):
        assert cliente_agente.get(reverse("agentes_app:logout")).status_code == 405


class TestRegistro:
    url = reverse("agentes_app:registro")

    def test_cadastro_cria_agente_e_entra(self, client, coordenador, dados_formulario):
        # Mesmo pedindo coordenação, o cadastro próprio é sempre de agente
        response = client.post(self.url, dados_formulario(funcao="Coordenador"))

        assert response.status_code == 302
        novo = Agente.objects.get(login="JOAO.PEREIRA")
        assert novo.funcao == FUNCAO_AGENTE
        assert novo.telefone == "(11) 98765-4321"
        assert novo.usuario is not None
        assert int(client.session["_auth_user_id"]) == novo.usuario.pk

        aviso = Notificacao.objects.get(usuario=coordenador.usuario)
        assert aviso.titulo == "Novo agente cadastrado"
        assert "João Pereira" in aviso.mensagem

    def test_login_repetido(self, client, fabrica_agente, dados_formulario):
        fabrica_agente(login="JOAO.PEREIRA")

        response = client.post(self.url, dados_formulario())

        assert response.status_code == 200
        assert "Este login já está em uso. Por favor, escolha outro." in str(
            response.context["form"].errors["login"]
        )
        assert Agente.objects.count() == 1

    def test_telefone_obrigatorio(self, client, dados_formulario):
        response = client.post(self.url, dados_formulario(telefone="---"))

        assert response.status_code == 200
        assert "telefone" in response.context["form"].errors
        assert not Agente.objects.exists()

    def test_formulario_em_branco(self, client):
        response = client.get(self.url)
        assert response.status_code == 200
        assert "funcao" not in response.context["form"].fields
