# -*- coding: utf-8 -*-
"""
agentes_app/templatetags/agentes_tags.py
Filtros usados nos cartões e formulários de agentes.

Uso:
    {% load agentes_tags %}
    {{ agente.foto.url|avatar:96 }}
    {{ agente.data_nascimento|data_br }}
    {% url_replace 'setor' 'Casos Especiais' %}
"""
import re

from django import template

from ..utils import formatar_data_br, formatar_telefone

register = template.Library()

CLOUDINARY_RE = re.compile(r"(https?://res\.cloudinary\.com/[^/]+/image/upload/)(v\d+/)?(.+)")


@register.filter
def avatar(url, size=96):
    """
    Miniatura quadrada centrada no rosto quando a foto está no Cloudinary.
    Outras URLs voltam sem alteração.
    """
    if not url:
        return ""

    url = str(url)
    match = CLOUDINARY_RE.match(url)
    if not match:
        return url

    base_url, versao, public_id = match.group(1), match.group(2) or "", match.group(3)
    return f"{base_url}w_{size},h_{size},c_fill,g_face,f_auto,q_auto/{versao}{public_id}"


@register.filter
def data_br(valor):
    return formatar_data_br(valor)


@register.filter
def telefone(valor):
    return formatar_telefone(valor) or (valor or "")


@register.filter
def iniciais(nome):
    """'Maria da Silva' -> 'MS' (placeholder do cartão sem foto)."""
    partes = (nome or "").split()
    if not partes:
        return "?"
    if len(partes) == 1:
        return partes[0][:1].upper()
    return (partes[0][:1] + partes[-1][:1]).upper()


@register.simple_tag(takes_context=True)
def url_replace(context, field, value):
    """
    Troca um parâmetro GET mantendo os demais.
    Uso: {% url_replace 'setor' 'Casos Especiais' %}
    """
    query = context["request"].GET.copy()
    if value in (None, ""):
        query.pop(field, None)
    else:
        query[field] = value
    return query.urlencode()
