# ═══════════════════════════════════════════════════════════════════════════════
# agentes_app/signals.py
# Registro de entradas no sistema e limpeza do usuário ao excluir um agente
# ═══════════════════════════════════════════════════════════════════════════════

import logging

from django.contrib.auth.signals import user_logged_in, user_login_failed
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Agente

logger = logging.getLogger(__name__)


@receiver(user_logged_in)
def registrar_entrada(sender, request, user, **kwargs):
    agente = getattr(user, "agente", None)
    if agente is None:
        logger.info("Usuário %s entrou no sistema", user.username)
        return
    logger.info("Agente %s (%s) entrou no sistema como %s", agente.pk, agente.login, agente.funcao)


@receiver(user_login_failed)
def registrar_falha_entrada(sender, credentials, request=None, **kwargs):
    logger.warning("Tentativa de entrada recusada: %s", credentials.get("login") or credentials.get("username"))


@receiver(post_delete, sender=Agente)
def excluir_usuario_do_agente(sender, instance, **kwargs):
    """
    O usuário criado para o agente não tem senha nem outro uso:
    sai junto com o agente. Contas de equipe (staff) são preservadas.
    """
    usuario = instance.usuario
    if usuario is None or usuario.is_staff or usuario.is_superuser:
        return
    logger.info("Removendo usuário %s do agente excluído %s", usuario.username, instance.pk)
    usuario.delete()
