from functools import wraps

from django.contrib import messages
from django.contrib.auth import logout
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect


def agente_do_usuario(user):
    if not user.is_authenticated:
        return None
    return getattr(user, "agente", None)


def agente_requerido(view_func):
    """
    O usuário precisa estar logado e vinculado a um Agente.
    Deixa o agente disponível em request.agente.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())

        agente = agente_do_usuario(request.user)
        if agente is None:
            logout(request)
            messages.error(request, "Sua conta não está vinculada a nenhum agente cadastrado.")
            return redirect("agentes_app:login")

        request.agente = agente
        return view_func(request, *args, **kwargs)

    return wrapper


def coordenador_requerido(view_func):
    """
    Como agente_requerido, mas só deixa passar coordenadores.
    Agentes comuns voltam para o próprio cadastro.
    """
    @wraps(view_func)
    @agente_requerido
    def wrapper(request, *args, **kwargs):
        if not request.agente.e_coordenador:
            messages.error(request, "Você não tem permissão para acessar esta área.")
            return redirect("agentes_app:lista")
        return view_func(request, *args, **kwargs)

    return wrapper
