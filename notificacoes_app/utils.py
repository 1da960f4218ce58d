# notificacoes_app/utils.py

import logging

from django.urls import NoReverseMatch, reverse

from .models import Notificacao

logger = logging.getLogger(__name__)


def criar_notificacao(
    usuario,
    titulo,
    mensagem="",
    url_name=None,
    tipo="info",
):
    """
    Cria uma notificação para um usuário.

    - usuario: instância de User (request.user, por exemplo)
    - titulo: texto curto mostrado na lista
    - mensagem: texto mais longo (opcional)
    - url_name: nome de URL do Django, por exemplo "agentes_app:lista".
                Se não puder ser resolvido, é guardado como veio (caminho direto).
    - tipo: "info", "success", "warning", "error"
    """

    url_destino = ""

    if url_name:
        try:
            url_destino = reverse(url_name)
        except NoReverseMatch:
            url_destino = url_name

    return Notificacao.objects.create(
        usuario=usuario,
        titulo=titulo,
        mensagem=mensagem,
        url_destino=url_destino,
        tipo=tipo,
    )


def notificar_coordenadores(titulo, mensagem="", url_name=None, tipo="info"):
    """
    Envia a mesma notificação para todos os coordenadores com usuário vinculado.
    Devolve a quantidade de notificações criadas.
    """
    from agentes_app.models import Agente, FUNCAO_COORDENADOR

    coordenadores = (
        Agente.objects.filter(funcao__iexact=FUNCAO_COORDENADOR, usuario__isnull=False)
        .select_related("usuario")
    )

    total = 0
    for coordenador in coordenadores:
        criar_notificacao(coordenador.usuario, titulo, mensagem, url_name=url_name, tipo=tipo)
        total += 1

    logger.info("Notificação '%s' enviada para %s coordenador(es)", titulo, total)
    return total
