from django.urls import path
from . import views

app_name = "core"

urlpatterns = [
    path("", views.root_redirect, name="root_redirect"),
    path("sobre/", views.sobre, name="sobre"),
    path("tema/alternar/", views.alternar_tema, name="alternar_tema"),

    # Diagnóstico e log de erros
    path("diagnostico/", views.diagnostico, name="diagnostico"),
    path("log-erros/baixar/", views.baixar_log, name="baixar_log"),

    path("configuracao/", views.configuracao_geral, name="configuracao_geral"),
]
