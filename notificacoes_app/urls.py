from django.urls import path
from . import views

app_name = "notificacoes_app"

urlpatterns = [
    path("marcar-lidas/", views.marcar_todas_lidas, name="marcar_todas_lidas"),
]
