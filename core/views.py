import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render, redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_POST

from agentes_app.acesso import coordenador_requerido
from agentes_app.models import Agente

from .forms import ConfiguracaoGeralForm
from .models import ConfiguracaoSistema
from .utils_log import (
    NOME_ARQUIVO_LOG,
    gerar_conteudo_log,
    mensagem_de_erro,
    notificar_erro,
    obter_log,
)
from .utils_tema import COOKIE_TEMA, DURACAO_COOKIE_TEMA, obter_tema, tema_oposto

logger = logging.getLogger(__name__)


def _destino_seguro(request, padrao="core:root_redirect"):
    destino = request.POST.get("next") or request.GET.get("next") or request.META.get("HTTP_REFERER")
    if destino and url_has_allowed_host_and_scheme(
        destino,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return destino
    return padrao


def root_redirect(request):
    # Logado vai para a lista; senão, para o login
    if request.user.is_authenticated:
        return redirect("agentes_app:lista")
    return redirect("agentes_app:login")


@require_GET
def sobre(request):
    """Página 'Sobre' do aplicativo."""
    return render(request, "core/sobre.html")


@require_POST
def alternar_tema(request):
    """Alterna entre tema claro e escuro e guarda a escolha em cookie."""
    novo_tema = tema_oposto(obter_tema(request))
    response = redirect(_destino_seguro(request))
    response.set_cookie(COOKIE_TEMA, novo_tema, max_age=DURACAO_COOKIE_TEMA, samesite="Lax")
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# DIAGNÓSTICO DA CONEXÃO COM O BANCO
# ═══════════════════════════════════════════════════════════════════════════════

def classificar_erro_conexao(mensagem):
    """
    Classifica a falha de conexão para orientar a correção:
    'autenticacao', 'tabela' ou 'desconhecido'.
    """
    texto = (mensagem or "").lower()

    if any(chave in texto for chave in ("password", "authentication", "jwt", "api key")):
        return "autenticacao"

    if (
        ("relation" in texto and "does not exist" in texto)
        or "no such table" in texto
        or "could not find the table" in texto
    ):
        return "tabela"

    return "desconhecido"


def verificar_conexao():
    """Executa uma consulta mínima. Devolve None se OK ou a mensagem de erro."""
    try:
        list(Agente.objects.only("id")[:1])
    except DatabaseError as e:
        return mensagem_de_erro(e)
    return None


@require_GET
def diagnostico(request):
    erro = verificar_conexao()
    quer_json = request.GET.get("formato") == "json"

    if erro is None:
        if quer_json:
            return JsonResponse({"status": "ok"})
        return render(request, "core/diagnostico.html", {"erro": None, "tipo_erro": None})

    tipo_erro = classificar_erro_conexao(erro)

    if quer_json:
        # Respostas 5xx não salvam a sessão; o erro fica só no log do servidor
        logger.error("Falha ao conectar ao banco de dados (%s): %s", tipo_erro, erro)
        return JsonResponse({"status": "erro", "tipo": tipo_erro, "mensagem": erro}, status=503)

    notificar_erro(request, f"Falha ao conectar ao banco de dados: {erro}.", "DB_CONNECTION")

    context = {
        "erro": erro,
        "tipo_erro": tipo_erro,
        "log_erros": obter_log(request),
    }
    return render(request, "core/diagnostico.html", context)


@require_GET
def baixar_log(request):
    """Baixa o log de erros da sessão atual como arquivo texto."""
    log = obter_log(request)

    if not log:
        messages.info(request, "Nenhum erro foi registrado na sessão atual.")
        return redirect(_destino_seguro(request))

    response = HttpResponse(gerar_conteudo_log(log), content_type="text/plain; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{NOME_ARQUIVO_LOG}"'
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURAÇÃO (somente coordenação)
# ═══════════════════════════════════════════════════════════════════════════════

@coordenador_requerido
def configuracao_geral(request):
    """
    Configuração geral: nome da pastoral, paróquia, logo e mensagem do WhatsApp.
    """
    config = ConfiguracaoSistema.load()

    if request.method == "POST":
        form = ConfiguracaoGeralForm(request.POST, request.FILES, instance=config)
        if form.is_valid():
            form.save()
            messages.success(request, "Configuração salva com sucesso.")
            return redirect("core:configuracao_geral")
        else:
            messages.error(request, "Há erros no formulário. Revise os campos em vermelho.")
    else:
        form = ConfiguracaoGeralForm(instance=config)

    return render(request, "core/configuracao_geral.html", {"form": form, "config": config})
