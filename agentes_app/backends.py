# agentes_app/backends.py
"""
Autenticação por login + data de nascimento.

Os agentes não têm senha: entram com o login cadastrado e a data de
nascimento. Cada agente ganha um usuário do Django (sem senha utilizável)
na primeira vez que entra, para aproveitar sessões e permissões.
"""
import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend
from django.db import DatabaseError, transaction

from .models import Agente

logger = logging.getLogger(__name__)


def localizar_agente(login, data_nascimento):
    """
    Procura o agente em duas etapas:

    1) login sem diferenciar maiúsculas, conferindo a data de nascimento;
    2) se nada for encontrado, busca pela data de nascimento e compara o
       login já limpo (cobre logins gravados com espaços sobrando).

    Falha na etapa 1 é registrada e a etapa 2 ainda é tentada.
    Erros de banco na etapa 2 sobem para quem chamou.
    """
    login_limpo = (login or "").strip()
    if not login_limpo or not data_nascimento:
        return None

    try:
        candidatos = Agente.objects.filter(login__iexact=login_limpo)
        for agente in candidatos:
            if agente.data_nascimento == data_nascimento:
                return agente
    except DatabaseError:
        logger.exception("Erro na busca do agente pelo login '%s'", login_limpo)

    alvo = login_limpo.lower()
    for agente in Agente.objects.filter(data_nascimento=data_nascimento):
        if (agente.login or "").strip().lower() == alvo:
            return agente

    return None


def usuario_para_agente(agente):
    """Devolve o usuário do Django ligado ao agente, criando se não existir."""
    if agente.usuario_id:
        return agente.usuario

    User = get_user_model()
    with transaction.atomic():
        usuario, criado = User.objects.get_or_create(username=f"agente-{agente.pk}")
        if criado:
            usuario.set_unusable_password()
        usuario.first_name = agente.primeiro_nome[:150]
        usuario.email = agente.email or ""
        usuario.save()

        agente.usuario = usuario
        agente.save(update_fields=["usuario"])

    logger.info("Usuário %s vinculado ao agente %s", usuario.username, agente.pk)
    return usuario


class LoginDataNascimentoBackend(BaseBackend):

    def authenticate(self, request, login=None, data_nascimento=None, **kwargs):
        if not login or not data_nascimento:
            return None

        agente = localizar_agente(login, data_nascimento)
        if agente is None:
            logger.warning(
                "Login falhou. Credenciais tentadas: login='%s', data_nascimento='%s'",
                (login or "").strip(),
                data_nascimento,
            )
            return None

        usuario = usuario_para_agente(agente)
        if not usuario.is_active:
            return None
        return usuario

    def get_user(self, user_id):
        User = get_user_model()
        try:
            usuario = User.objects.get(pk=user_id)
        except User.DoesNotExist:
            return None
        return usuario if usuario.is_active else None
