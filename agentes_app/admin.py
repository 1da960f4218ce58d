from django.contrib import admin

from .models import Agente, EnvioWhatsApp


@admin.register(Agente)
class AgenteAdmin(admin.ModelAdmin):
    list_display = (
        "nome_completo",
        "login",
        "setor",
        "funcao",
        "estado_civil",
        "telefone",
        "data_ingresso",
    )
    list_filter = ("funcao", "setor", "estado_civil", "possui_veiculo")
    search_fields = ("nome_completo", "login", "telefone", "email")
    readonly_fields = ("criado_em", "atualizado_em")
    raw_id_fields = ("usuario",)


@admin.register(EnvioWhatsApp)
class EnvioWhatsAppAdmin(admin.ModelAdmin):
    list_display = ("agente", "telefone", "estado", "lote", "criado_em", "enviado_em")
    list_filter = ("estado",)
    search_fields = ("agente__nome_completo", "telefone")
    readonly_fields = ("lote", "criado_em", "enviado_em")
