from django.apps import AppConfig


class NotificacoesAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notificacoes_app"
    verbose_name = "Notificações"
