from django.apps import AppConfig


class AgentesAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agentes_app"
    verbose_name = "Agentes da Pastoral"

    def ready(self):
        import agentes_app.signals  # noqa: F401
