# -*- coding: utf-8 -*-
"""
agentes_app/views/__init__.py
Exporta todas as views para o urls.py.
"""

# Acesso
from .acesso import (
    login_view,
    logout_view,
    registro,
)

# Cadastro de agentes
from .agentes import (
    lista,
    criar,
    editar,
    meu_cadastro,
    excluir,
    ficha_pdf,
    filtrar_agentes,
)

# Relatórios e exportações
from .reportes import (
    relatorios,
    relatorio_pdf,
    exportar_csv,
    exportar_excel,
    exportar_fichas_pdf,
    aniversariantes,
    calcular_estatisticas,
)

# WhatsApp
from .whatsapp import (
    whatsapp_novo,
    whatsapp_lote,
    whatsapp_abrir,
    criar_lote,
)

# API / JSON
from .api import api_buscar_cep
