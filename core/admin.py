from django.contrib import admin
from .models import ConfiguracaoSistema


@admin.register(ConfiguracaoSistema)
class ConfiguracaoSistemaAdmin(admin.ModelAdmin):
    """
    Só permitimos um registro de configuração do sistema.
    """
    list_display = ("nome_pastoral", "nome_paroquia", "mostrar_logo_em_relatorios")

    # Evita criar mais de um registro
    def has_add_permission(self, request):
        if ConfiguracaoSistema.objects.exists():
            return False
        return super().has_add_permission(request)
