# agentes_app/cep.py
"""
Consulta de CEP para preencher o endereço automaticamente.
"""
import json
import logging
import urllib.error
import urllib.request

from django.conf import settings

from .utils import apenas_digitos

logger = logging.getLogger(__name__)


class CepErro(Exception):
    """Falha na busca do CEP. A mensagem já vem pronta para o usuário."""


def buscar_cep(cep):
    """
    Busca o endereço do CEP e devolve
    {"logradouro", "bairro", "cidade", "uf"}.
    """
    digitos = apenas_digitos(cep)
    if len(digitos) != 8:
        raise CepErro("CEP inválido.")

    url = settings.CEP_API_URL.format(cep=digitos)
    timeout = getattr(settings, "CEP_API_TIMEOUT", 8)

    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            dados = json.loads(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        if e.code == 404:
            raise CepErro("CEP não encontrado.") from e
        logger.warning("Serviço de CEP respondeu %s para %s", e.code, digitos)
        raise CepErro("Serviço de busca de CEP indisponível no momento.") from e
    except (urllib.error.URLError, TimeoutError, ValueError) as e:
        logger.warning("Falha ao consultar o CEP %s: %s", digitos, e)
        raise CepErro("Não foi possível buscar o CEP. Verifique sua conexão com a internet.") from e

    return {
        "logradouro": dados.get("street") or "",
        "bairro": dados.get("neighborhood") or "",
        "cidade": dados.get("city") or "",
        "uf": dados.get("state") or "",
    }
