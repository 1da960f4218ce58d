# -*- coding: utf-8 -*-
"""
agentes_app/utils.py
Funções auxiliares e constantes compartilhadas entre modelos, views e PDFs.
"""

import re
from datetime import date, datetime
from urllib.parse import quote


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTANTES
# ═══════════════════════════════════════════════════════════════════════════════

MESES_PT = {
    1: "janeiro", 2: "fevereiro", 3: "março", 4: "abril",
    5: "maio", 6: "junho", 7: "julho", 8: "agosto",
    9: "setembro", 10: "outubro", 11: "novembro", 12: "dezembro",
}

# Nome das bodas por anos de casamento
BODAS = {
    1: "Papel",
    2: "Algodão",
    3: "Couro",
    4: "Flores e Frutas",
    5: "Madeira",
    6: "Açúcar",
    7: "Lã",
    8: "Barro",
    9: "Cerâmica",
    10: "Estanho",
    11: "Aço",
    12: "Seda",
    13: "Renda",
    14: "Marfim",
    15: "Cristal",
    20: "Porcelana",
    25: "Prata",
    30: "Pérola",
    35: "Coral",
    40: "Rubi",
    45: "Safira",
    50: "Ouro",
    55: "Esmeralda",
    60: "Diamante",
    65: "Ferro",
    70: "Vinho",
    75: "Brilhante",
}

DATA_BR_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


# ═══════════════════════════════════════════════════════════════════════════════
# DATAS
# ═══════════════════════════════════════════════════════════════════════════════

def calcular_idade(data_nascimento, data_referencia=None):
    """Calcula anos completos a partir de uma data."""
    if not data_nascimento:
        return None

    referencia = data_referencia or date.today()
    anos = referencia.year - data_nascimento.year

    if (referencia.month, referencia.day) < (data_nascimento.month, data_nascimento.day):
        anos -= 1

    return anos


def formatar_data_br(valor):
    """date -> 'DD/MM/AAAA' (vazio se None)."""
    if not valor:
        return ""
    return valor.strftime("%d/%m/%Y")


def converter_data_login(texto):
    """
    Converte a data digitada no login para date.
    Aceita 'DD/MM/AAAA' (máscara do formulário) ou ISO 'AAAA-MM-DD'.
    Devolve None se não for uma data válida.
    """
    texto = (texto or "").strip()
    if not texto:
        return None

    m = DATA_BR_RE.match(texto)
    try:
        if m:
            dia, mes, ano = (int(p) for p in m.groups())
            return date(ano, mes, dia)
        return datetime.strptime(texto.split("T")[0], "%Y-%m-%d").date()
    except ValueError:
        return None


# ═══════════════════════════════════════════════════════════════════════════════
# BODAS
# ═══════════════════════════════════════════════════════════════════════════════

def anos_de_casamento(data_casamento, data_referencia=None):
    """Anos completos de casamento."""
    return calcular_idade(data_casamento, data_referencia)


def nome_bodas(anos):
    """Nome das bodas para os anos informados (None se não houver nome)."""
    if anos is None:
        return None
    return BODAS.get(anos)


def descricao_bodas(data_casamento, data_referencia=None):
    """
    Texto para exibir no cartão e na ficha.
    Ex: 'Bodas de Prata (25 anos)'. None antes de completar 1 ano.
    """
    anos = anos_de_casamento(data_casamento, data_referencia)
    if anos is None or anos < 1:
        return None

    sufixo = "1 ano" if anos == 1 else f"{anos} anos"
    nome = nome_bodas(anos)
    if nome:
        return f"Bodas de {nome} ({sufixo})"
    return f"{sufixo} de casamento"


# ═══════════════════════════════════════════════════════════════════════════════
# FORMATAÇÃO DE CAMPOS
# ═══════════════════════════════════════════════════════════════════════════════

def apenas_digitos(valor):
    """Extrai só os dígitos (telefones, CEP)."""
    return "".join(ch for ch in (valor or "") if ch.isdigit())


def formatar_telefone(valor):
    """
    Máscara de telefone brasileiro:
    (XX) XXXX-XXXX para fixos e (XX) XXXXX-XXXX para celulares.
    """
    numeros = apenas_digitos(valor)
    if not numeros:
        return ""
    if len(numeros) <= 2:
        return f"({numeros}"
    if len(numeros) <= 6:
        return f"({numeros[:2]}) {numeros[2:]}"
    if len(numeros) <= 10:
        return f"({numeros[:2]}) {numeros[2:6]}-{numeros[6:]}"
    return f"({numeros[:2]}) {numeros[2:7]}-{numeros[7:11]}"


def formatar_cep(valor):
    """Máscara XXXXX-XXX."""
    numeros = apenas_digitos(valor)
    if len(numeros) > 5:
        return f"{numeros[:5]}-{numeros[5:8]}"
    return numeros


def slug_arquivo(nome, padrao="agente"):
    """Nome de arquivo: minúsculas, tudo que não for [a-z0-9] vira '_'."""
    if not nome:
        return padrao
    return re.sub(r"[^a-z0-9]", "_", nome.lower())


def porcentagem(quantidade, base):
    """Porcentagem com proteção contra divisão por zero."""
    if not base:
        return 0
    return round((quantidade * 100) / base, 1)


# ═══════════════════════════════════════════════════════════════════════════════
# WHATSAPP
# ═══════════════════════════════════════════════════════════════════════════════

def normalizar_telefone_whatsapp(telefone, ddi="55"):
    """
    Telefone só com dígitos, pronto para wa.me.
    - Mais de 11 dígitos: já vem com DDI, fica como está.
    - Até 11 dígitos (DDD + número): antepõe o DDI.
    """
    digitos = apenas_digitos(telefone)
    if not digitos:
        return ""
    if len(digitos) > 11:
        return digitos
    return f"{ddi}{digitos}"


def personalizar_mensagem(modelo, nome_completo):
    """Troca todas as ocorrências de {nome} pelo primeiro nome."""
    primeiro = (nome_completo or "").split(" ")[0]
    return (modelo or "").replace("{nome}", primeiro)


def montar_link_whatsapp(telefone_normalizado, mensagem):
    return f"https://wa.me/{telefone_normalizado}?text={quote(mensagem, safe='')}"
