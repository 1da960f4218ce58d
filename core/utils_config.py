# core/utils_config.py
from django.conf import settings

from .models import ConfiguracaoSistema


def get_config():
    """
    Devolve a instância única de configuração do sistema.
    """
    return ConfiguracaoSistema.load()


def get_ddi_padrao():
    """Código do país usado nos links do WhatsApp (padrão: 55)."""
    return str(getattr(settings, "DDI_PADRAO_WHATSAPP", "55"))


def get_saudacao_whatsapp():
    """
    Mensagem inicial do envio em massa.

    1) Lê da ConfiguracaoSistema
    2) Se estiver vazia, usa o texto padrão
    """
    cfg = get_config()
    texto = getattr(cfg, "saudacao_whatsapp", "") or ""
    if not texto.strip():
        return "Olá, {nome}! Paz e bem!\n\n"
    return texto


def get_logo_relatorio():
    """
    Origem do logo para os PDFs: caminho do arquivo enviado, URL remota
    configurada em settings, ou None se o logo estiver desativado.
    """
    cfg = get_config()
    if not cfg.mostrar_logo_em_relatorios:
        return None

    if cfg.logo:
        try:
            return cfg.logo.path
        except NotImplementedError:
            # Storage remoto (Cloudinary) não tem caminho local
            return cfg.logo.url

    return getattr(settings, "LOGO_RELATORIO_URL", None) or None
