import pytest
from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.urls import reverse

from agentes_app.models import (
    Agente,
    ESTADO_CIVIL_SOLTEIRO,
    FUNCAO_AGENTE,
    SETOR_CASOS_ESPECIAIS,
)
from core.utils_log import SESSAO_LOG_ERROS

pytestmark = pytest.mark.django_db


def textos(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


class TestAcesso:
    def test_anonimo_vai_para_login(self, client):
        response = client.get(reverse("agentes_app:lista"))
        assert response.status_code == 302
        assert response.url.startswith(reverse("agentes_app:login"))

    def test_usuario_sem_agente_e_deslogado(self, client):
        usuario = get_user_model().objects.create_user("admin", password="x")
        client.force_login(usuario)

        response = client.get(reverse("agentes_app:lista"))

        assert response.url == reverse("agentes_app:login")
        assert "Sua conta não está vinculada a nenhum agente cadastrado." in textos(response)
        assert "_auth_user_id" not in client.session

    def test_agente_nao_entra_em_area_da_coordenacao(self, cliente_agente):
        response = cliente_agente.get(reverse("agentes_app:relatorios"))
        assert response.url == reverse("agentes_app:lista")
        assert "Você não tem permissão para acessar esta área." in textos(response)


class TestLista:
    def test_agente_ve_apenas_o_proprio_cadastro(self, cliente_agente, agente, fabrica_agente):
        fabrica_agente(login="OUTRA", nome_completo="Outra Pessoa")

        response = cliente_agente.get(reverse("agentes_app:lista"))

        assert response.context["meu_cadastro"] is True
        assert response.context["agentes"] == [agente]

    def test_coordenador_ve_todos(self, cliente_coordenador, agente):
        response = cliente_coordenador.get(reverse("agentes_app:lista"))

        assert response.context["meu_cadastro"] is False
        assert response.context["total"] == 2

    def test_filtros(self, cliente_coordenador, agente, fabrica_agente):
        outro = fabrica_agente(
            login="PEDRO",
            nome_completo="Pedro Santos",
            estado_civil=ESTADO_CIVIL_SOLTEIRO,
            setor=SETOR_CASOS_ESPECIAIS,
            telefone="(21) 99999-0000",
        )
        url = reverse("agentes_app:lista")

        assert cliente_coordenador.get(url, {"q": "pedro"}).context["agentes"] == [outro]
        assert cliente_coordenador.get(url, {"q": "99999"}).context["agentes"] == [outro]
        assert cliente_coordenador.get(url, {"setor": SETOR_CASOS_ESPECIAIS}).context["agentes"] == [outro]
        assert cliente_coordenador.get(url, {"estado_civil": "Casado(a)"}).context["total"] == 2
        assert cliente_coordenador.get(url, {"funcao": "Agente"}).context["total"] == 2
        assert cliente_coordenador.get(url, {"ids": [str(agente.pk)]}).context["agentes"] == [agente]

        setores = cliente_coordenador.get(url).context["setores_disponiveis"]
        assert setores == sorted(setores)
        assert SETOR_CASOS_ESPECIAIS in setores


class TestCriarEditar:
    def test_coordenador_cria_agente(self, cliente_coordenador, dados_formulario):
        response = cliente_coordenador.post(
            reverse("agentes_app:criar"),
            dados_formulario(funcao="Coordenador", possui_veiculo="on", modelo_veiculo="Gol"),
        )

        assert response.url == reverse("agentes_app:lista")
        assert "Agente salvo com sucesso!" in textos(response)
        novo = Agente.objects.get(login="JOAO.PEREIRA")
        assert novo.e_coordenador
        assert novo.modelo_veiculo == "Gol"

    def test_agente_nao_cria(self, cliente_agente, dados_formulario):
        cliente_agente.post(reverse("agentes_app:criar"), dados_formulario())
        assert not Agente.objects.filter(login="JOAO.PEREIRA").exists()

    def test_agente_edita_o_proprio_cadastro_sem_mudar_funcao(self, cliente_agente, agente, dados_formulario):
        response = cliente_agente.post(
            reverse("agentes_app:editar", args=[agente.pk]),
            dados_formulario(login="NOVO", nome_completo="Maria Souza", funcao="Coordenador"),
        )

        assert response.url == reverse("agentes_app:lista")
        agente.refresh_from_db()
        assert agente.nome_completo == "Maria Souza"
        assert agente.login == "MARIA"
        assert agente.funcao == FUNCAO_AGENTE
        # Solteiro(a): dados do cônjuge apagados
        assert agente.nome_conjuge == ""
        assert agente.data_casamento is None

    def test_agente_nao_edita_outro(self, cliente_agente, fabrica_agente, dados_formulario):
        outro = fabrica_agente(login="OUTRA", nome_completo="Outra Pessoa")

        response = cliente_agente.post(
            reverse("agentes_app:editar", args=[outro.pk]),
            dados_formulario(nome_completo="Invasão"),
        )

        assert response.url == reverse("agentes_app:lista")
        assert "Você não tem permissão para editar outros agentes." in textos(response)
        outro.refresh_from_db()
        assert outro.nome_completo == "Outra Pessoa"
        assert "[SAVE_AGENT]" in cliente_agente.session[SESSAO_LOG_ERROS][0]

    def test_coordenador_edita_qualquer_um(self, cliente_coordenador, agente, dados_formulario):
        response = cliente_coordenador.post(
            reverse("agentes_app:editar", args=[agente.pk]),
            dados_formulario(funcao="Coordenador"),
        )

        assert response.status_code == 302
        agente.refresh_from_db()
        assert agente.e_coordenador

    def test_formulario_com_erros(self, cliente_coordenador, agente, dados_formulario):
        response = cliente_coordenador.post(
            reverse("agentes_app:editar", args=[agente.pk]),
            dados_formulario(nome_completo=""),
        )
        assert response.status_code == 200
        assert "nome_completo" in response.context["form"].errors

    def test_meu_cadastro(self, cliente_agente, agente):
        response = cliente_agente.get(reverse("agentes_app:meu_cadastro"))
        assert response.url == reverse("agentes_app:editar", args=[agente.pk])

        response = cliente_agente.get(response.url)
        assert response.status_code == 200
        assert response.context["titulo"] == "Meu Cadastro"


class TestExcluir:
    def test_coordenador_exclui_e_usuario_some(self, cliente_coordenador, agente):
        usuario_id = agente.usuario_id

        response = cliente_coordenador.post(reverse("agentes_app:excluir", args=[agente.pk]))

        assert "Agente excluído com sucesso!" in textos(response)
        assert not Agente.objects.filter(pk=agente.pk).exists()
        assert not get_user_model().objects.filter(pk=usuario_id).exists()

    def test_conta_de_equipe_e_preservada(self, cliente_coordenador, agente):
        agente.usuario.is_staff = True
        agente.usuario.save()

        cliente_coordenador.post(reverse("agentes_app:excluir", args=[agente.pk]))

        assert get_user_model().objects.filter(pk=agente.usuario_id).exists()

    def test_agente_nao_exclui(self, cliente_agente, coordenador):
        response = cliente_agente.post(reverse("agentes_app:excluir", args=[coordenador.pk]))

        assert "Você não tem permissão para excluir agentes." in textos(response)
        assert Agente.objects.filter(pk=coordenador.pk).exists()

    def test_get_nao_permitido(self, cliente_coordenador, agente):
        response = cliente_coordenador.get(reverse("agentes_app:excluir", args=[agente.pk]))
        assert response.status_code == 405
