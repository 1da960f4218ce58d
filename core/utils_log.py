# core/utils_log.py
"""
Registro de erros da sessão.

Cada falha mostrada ao usuário também fica guardada na sessão para que
possa ser baixada como arquivo de texto e enviada ao suporte.
"""
import json
import logging

from django.conf import settings
from django.contrib import messages
from django.utils import timezone

logger = logging.getLogger(__name__)

SESSAO_LOG_ERROS = "log_erros"
NOME_ARQUIVO_LOG = "pastoral_app_error_log.txt"
MENSAGEM_GENERICA = "Ocorreu um erro inesperado. Verifique o console para mais detalhes."


def mensagem_de_erro(erro):
    """Extrai um texto legível de qualquer erro (exceção, string ou estrutura)."""
    mensagem = getattr(erro, "message", None)
    if isinstance(mensagem, str) and mensagem:
        return mensagem

    if isinstance(erro, str):
        return erro

    if isinstance(erro, BaseException):
        return str(erro) or MENSAGEM_GENERICA

    try:
        texto = json.dumps(erro, default=str)
    except (TypeError, ValueError):
        return MENSAGEM_GENERICA

    if texto and texto not in ("null", "{}"):
        return texto
    return MENSAGEM_GENERICA


def obter_log(request):
    return list(request.session.get(SESSAO_LOG_ERROS, []))


def registrar_erro(request, mensagem, contexto="GERAL"):
    """Acrescenta uma linha '<timestamp> [CONTEXTO]: mensagem' ao log da sessão."""
    if not mensagem:
        return None

    entrada = f"{timezone.now().isoformat()} [{contexto or 'GERAL'}]: {mensagem}"
    log = obter_log(request)
    log.append(entrada)
    request.session[SESSAO_LOG_ERROS] = log
    logger.error(entrada)
    return entrada


def notificar_erro(request, mensagem, contexto="GERAL"):
    """Registra o erro na sessão e mostra o toast de erro."""
    if registrar_erro(request, mensagem, contexto):
        messages.error(request, mensagem)


def gerar_conteudo_log(log):
    """Monta o texto do arquivo de log para download."""
    banco = settings.DATABASES.get("default", {})
    destino = banco.get("HOST") or banco.get("NAME") or "(não definido)"
    agora = timezone.localtime().strftime("%d/%m/%Y %H:%M:%S")

    linhas = [
        "Log de Erros - Pastoral Familiar App",
        "====================================",
        f"Data: {agora}",
        f"Banco de dados configurado: {banco.get('ENGINE', '')} ({destino})",
        "====================================",
    ]
    linhas.extend(log)
    return "\n".join(linhas)
