# -*- coding: utf-8 -*-
"""
agentes_app/views/acesso.py
Entrada, saída e primeiro cadastro dos agentes.
"""

import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.db import DatabaseError, IntegrityError, transaction
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from core.utils_log import SESSAO_LOG_ERROS, mensagem_de_erro, notificar_erro
from notificacoes_app.utils import notificar_coordenadores

from ..backends import usuario_para_agente
from ..forms import AgenteRegistroForm, LoginForm

logger = logging.getLogger(__name__)

BACKEND_AGENTES = "agentes_app.backends.LoginDataNascimentoBackend"

MSG_LOGIN_INCORRETO = (
    "Login ou data de nascimento incorretos. "
    "Verifique se o Login está digitado corretamente."
)
MSG_LOGIN_EM_USO = "Este login já está em uso. Por favor, escolha outro."


@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.user.is_authenticated:
        return redirect("agentes_app:lista")

    form = LoginForm(request.POST or None)

    if request.method == "POST":
        if not form.is_valid():
            for erro in form.non_field_errors():
                messages.error(request, erro)
            return render(request, "agentes_app/login.html", {"form": form})

        try:
            usuario = authenticate(
                request,
                login=form.cleaned_data["login"],
                data_nascimento=form.cleaned_data["data_nascimento"],
            )
        except DatabaseError as e:
            notificar_erro(request, f"Erro ao tentar fazer login: {mensagem_de_erro(e)}", "LOGIN")
            return render(request, "agentes_app/login.html", {"form": form})

        if usuario is None:
            messages.error(request, MSG_LOGIN_INCORRETO)
            return render(request, "agentes_app/login.html", {"form": form})

        login(request, usuario, backend=BACKEND_AGENTES)
        messages.success(request, f"Bem-vindo, {usuario.agente.primeiro_nome}!")

        destino = request.GET.get("next")
        if destino and destino.startswith("/") and not destino.startswith("//"):
            return redirect(destino)
        return redirect("agentes_app:lista")

    return render(request, "agentes_app/login.html", {"form": form})


@require_http_methods(["POST"])
def logout_view(request):
    # O log de erros sobrevive ao fim da sessão para poder ser baixado
    log = request.session.get(SESSAO_LOG_ERROS, [])
    logout(request)
    if log:
        request.session[SESSAO_LOG_ERROS] = log

    messages.info(request, "Você saiu do sistema.")
    return redirect("agentes_app:login")


@require_http_methods(["GET", "POST"])
def registro(request):
    """
    Primeiro acesso: o próprio agente preenche o cadastro.
    A função é sempre 'Agente'; depois de salvar já entra no sistema.
    """
    if request.user.is_authenticated:
        return redirect("agentes_app:lista")

    if request.method == "POST":
        form = AgenteRegistroForm(request.POST, request.FILES)
        if form.is_valid():
            try:
                with transaction.atomic():
                    agente = form.save()
                    usuario = usuario_para_agente(agente)
            except IntegrityError:
                notificar_erro(request, MSG_LOGIN_EM_USO, "REGISTER")
                return render(request, "agentes_app/registro.html", {"form": form})
            except DatabaseError as e:
                notificar_erro(request, f"Erro ao cadastrar: {mensagem_de_erro(e)}", "REGISTER")
                return render(request, "agentes_app/registro.html", {"form": form})

            login(request, usuario, backend=BACKEND_AGENTES)

            notificar_coordenadores(
                titulo="Novo agente cadastrado",
                mensagem=f"{agente.nome_completo} ({agente.setor}) fez o próprio cadastro.",
                url_name="agentes_app:lista",
                tipo="info",
            )

            messages.success(request, f"Cadastro realizado com sucesso! Bem-vindo, {agente.primeiro_nome}!")
            return redirect("agentes_app:lista")

        messages.error(request, "Há erros no formulário. Revise os campos destacados.")
    else:
        form = AgenteRegistroForm()

    return render(request, "agentes_app/registro.html", {"form": form})
